from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from insights.config import settings
from insights.services.notification.base import Notifier
from insights.services.reporting.weekly import generate_weekly_report
from insights.storage.feedback_store import FeedbackStore
from insights.storage.report_store import ReportStore

logger = logging.getLogger(__name__)


def next_run_after(now: datetime, weekday: int, hour: int) -> datetime:
    """First ``weekday`` (0 = Monday) at ``hour``:00 strictly after ``now``."""
    candidate = now.replace(hour=hour, minute=0, second=0, microsecond=0)
    candidate += timedelta(days=(weekday - now.weekday()) % 7)
    if candidate <= now:
        candidate += timedelta(days=7)
    return candidate


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def run_report_schedule(
    feedback_store: FeedbackStore,
    report_store: ReportStore,
    notifier: Notifier,
    *,
    weekday: int | None = None,
    hour: int | None = None,
) -> None:
    """Generate the weekly report on a fixed weekly cadence until cancelled.

    The next slot is always computed after the last one that fired, so a sleep
    that wakes early or a fast report never runs the same slot twice.
    """
    weekday = settings.report_weekday if weekday is None else weekday
    hour = settings.report_hour if hour is None else hour
    last_run: datetime | None = None

    while True:
        now = _utcnow()
        reference = now if last_run is None else max(now, last_run)
        run_at = next_run_after(reference, weekday, hour)
        logger.info("Next weekly report scheduled for %s", run_at.isoformat())
        await asyncio.sleep(max((run_at - now).total_seconds(), 0.0))
        last_run = run_at
        try:
            await generate_weekly_report(feedback_store, report_store, notifier, now=run_at)
        except Exception:
            logger.error("Scheduled weekly report failed", exc_info=True)
