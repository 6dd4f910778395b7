from __future__ import annotations

import logging
from datetime import datetime, timezone

from insights.config import settings
from insights.models.feedback import FeedbackItem, FeedbackSubmission, Urgency
from insights.services.analysis.classifier import classify
from insights.services.notification.base import Notifier
from insights.services.notification.templates import CRITICAL_ALERT_SUBJECT, render_critical_alert
from insights.storage.feedback_store import FeedbackStore

logger = logging.getLogger(__name__)


def build_feedback_item(
    submission: FeedbackSubmission,
    threshold: int,
    now: datetime | None = None,
) -> FeedbackItem:
    """Classify a submission and stamp it with identity and ingestion time."""
    return FeedbackItem(
        description=submission.description,
        score=submission.score,
        urgency=classify(submission.score, threshold),
        timestamp=now or datetime.now(timezone.utc),
    )


async def ingest_feedback(
    submission: FeedbackSubmission,
    store: FeedbackStore,
    notifier: Notifier,
    *,
    threshold: int | None = None,
    now: datetime | None = None,
) -> FeedbackItem:
    """Classify, persist and (for CRITICAL items) alert the admin.

    Storage failures propagate; the alert is best-effort and cannot fail
    the ingestion once the item is stored.
    """
    if threshold is None:
        threshold = settings.critical_threshold

    item = build_feedback_item(submission, threshold, now)
    logger.info("Feedback %s scored %d classified as %s", item.id, item.score, item.urgency.value)

    await store.save(item)

    if item.urgency is Urgency.CRITICAL:
        logger.warning("Critical feedback %s received, notifying %s", item.id, settings.admin_email)
        try:
            sent = await notifier.notify(
                settings.admin_email, CRITICAL_ALERT_SUBJECT, render_critical_alert(item)
            )
        except Exception:
            logger.error("Critical alert for %s failed", item.id, exc_info=True)
            sent = False
        if not sent:
            logger.warning("Critical alert for %s was not delivered", item.id)

    return item
