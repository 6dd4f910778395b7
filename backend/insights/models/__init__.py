from insights.models.feedback import FeedbackItem, FeedbackSubmission, Urgency
from insights.models.report import RankedTerm, WeeklyReport

__all__ = [
    "FeedbackItem",
    "FeedbackSubmission",
    "RankedTerm",
    "Urgency",
    "WeeklyReport",
]
