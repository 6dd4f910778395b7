from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from insights.api.deps import get_feedback_store, get_notifier
from insights.config import settings
from insights.models.feedback import FeedbackItem, FeedbackSubmission, as_utc
from insights.services.intake.feedback_intake import ingest_feedback
from insights.services.notification.base import Notifier
from insights.services.reporting.weekly import report_window
from insights.storage.feedback_store import FeedbackStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", status_code=201, response_model=FeedbackItem)
async def submit_feedback(
    submission: FeedbackSubmission,
    store: FeedbackStore = Depends(get_feedback_store),
    notifier: Notifier = Depends(get_notifier),
) -> FeedbackItem:
    return await ingest_feedback(
        submission, store, notifier, threshold=settings.critical_threshold
    )


@router.get("", response_model=list[FeedbackItem])
async def list_feedback(
    start: datetime | None = Query(None, description="Window start (inclusive)"),
    end: datetime | None = Query(None, description="Window end (exclusive)"),
    store: FeedbackStore = Depends(get_feedback_store),
) -> list[FeedbackItem]:
    """Feedback received in ``[start, end)``; defaults to the current report window."""
    default_start, default_end = report_window(datetime.now(timezone.utc), settings.report_window_days)
    start = as_utc(start) if start else default_start
    end = as_utc(end) if end else default_end
    if start >= end:
        raise ValueError("start must be before end")
    return await store.find_by_time_range(start, end)


@router.get("/{feedback_id}", response_model=FeedbackItem)
async def get_feedback(
    feedback_id: str,
    store: FeedbackStore = Depends(get_feedback_store),
) -> FeedbackItem:
    item = await store.load(feedback_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Feedback not found")
    return item
