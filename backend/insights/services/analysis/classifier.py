from __future__ import annotations

from insights.models.feedback import Urgency

DEFAULT_CRITICAL_THRESHOLD = 3
HIGH_URGENCY_CEILING = 6


def classify(score: int, threshold: int = DEFAULT_CRITICAL_THRESHOLD) -> Urgency:
    """Map a 0-10 score to an urgency tag.

    Scores at or below ``threshold`` are CRITICAL, scores up to
    ``HIGH_URGENCY_CEILING`` are HIGH, everything above is NORMAL.
    Range checking happens at the ingestion boundary.
    """
    if score <= threshold:
        return Urgency.CRITICAL
    if score <= HIGH_URGENCY_CEILING:
        return Urgency.HIGH
    return Urgency.NORMAL
