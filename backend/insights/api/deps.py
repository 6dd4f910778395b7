from __future__ import annotations

from insights.services.notification.base import Notifier, build_notifier
from insights.storage.feedback_store import FeedbackStore
from insights.storage.report_store import ReportStore

_feedback_store: FeedbackStore | None = None
_report_store: ReportStore | None = None
_notifier: Notifier | None = None


def get_feedback_store() -> FeedbackStore:
    global _feedback_store
    if _feedback_store is None:
        _feedback_store = FeedbackStore()
    return _feedback_store


def get_report_store() -> ReportStore:
    global _report_store
    if _report_store is None:
        _report_store = ReportStore()
    return _report_store


def get_notifier() -> Notifier:
    global _notifier
    if _notifier is None:
        _notifier = build_notifier()
    return _notifier
