from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from insights.config import settings
from insights.models.report import WeeklyReport
from insights.services.analysis.aggregator import aggregate
from insights.services.notification.base import Notifier
from insights.services.notification.templates import WEEKLY_REPORT_SUBJECT, render_weekly_report
from insights.storage.feedback_store import FeedbackStore
from insights.storage.report_store import ReportStore

logger = logging.getLogger(__name__)


def report_window(now: datetime, window_days: int) -> tuple[datetime, datetime]:
    """Half-open window ``[now - window_days, now)``."""
    return now - timedelta(days=window_days), now


async def build_report(
    feedback_store: FeedbackStore,
    start: datetime,
    end: datetime,
) -> WeeklyReport:
    items = await feedback_store.find_by_time_range(start, end)
    return aggregate(items, start, end)


async def generate_weekly_report(
    feedback_store: FeedbackStore,
    report_store: ReportStore,
    notifier: Notifier,
    *,
    now: datetime | None = None,
    window_days: int | None = None,
) -> WeeklyReport:
    """Aggregate the last ``window_days`` of feedback, persist and mail the report.

    Storage errors on save propagate; the summary email is best-effort.
    """
    now = now or datetime.now(timezone.utc)
    if window_days is None:
        window_days = settings.report_window_days
    start, end = report_window(now, window_days)

    logger.info("Generating weekly report for %s to %s", start.isoformat(), end.isoformat())
    report = await build_report(feedback_store, start, end)
    await report_store.save(report)

    try:
        sent = await notifier.notify(
            settings.admin_email, WEEKLY_REPORT_SUBJECT, render_weekly_report(report)
        )
    except Exception:
        logger.error("Weekly report email for %s failed", report.id, exc_info=True)
        sent = False
    if not sent:
        logger.warning("Weekly report %s was saved but not delivered", report.id)

    logger.info(
        "Weekly report %s: %d items, average score %.2f",
        report.id, report.total_count, report.average_score,
    )
    return report
