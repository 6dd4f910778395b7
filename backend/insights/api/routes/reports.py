from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from insights.api.deps import get_feedback_store, get_notifier, get_report_store
from insights.config import settings
from insights.models.feedback import as_utc
from insights.models.report import WeeklyReport
from insights.services.notification.base import Notifier
from insights.services.reporting.weekly import build_report, generate_weekly_report, report_window
from insights.storage.feedback_store import FeedbackStore
from insights.storage.report_store import ReportStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("/weekly", status_code=201, response_model=WeeklyReport)
async def create_weekly_report(
    feedback_store: FeedbackStore = Depends(get_feedback_store),
    report_store: ReportStore = Depends(get_report_store),
    notifier: Notifier = Depends(get_notifier),
) -> WeeklyReport:
    """Run the weekly report now, exactly as the scheduler would."""
    return await generate_weekly_report(feedback_store, report_store, notifier)


@router.get("", response_model=list[WeeklyReport])
async def list_reports(
    limit: int = Query(20, ge=1, le=200),
    report_store: ReportStore = Depends(get_report_store),
) -> list[WeeklyReport]:
    reports = await report_store.list_reports()
    return reports[:limit]


@router.get("/latest", response_model=WeeklyReport)
async def latest_report(report_store: ReportStore = Depends(get_report_store)) -> WeeklyReport:
    report = await report_store.latest()
    if report is None:
        raise HTTPException(status_code=404, detail="No reports generated yet")
    return report


@router.get("/preview", response_model=WeeklyReport)
async def preview_report(
    start: datetime | None = Query(None),
    end: datetime | None = Query(None),
    feedback_store: FeedbackStore = Depends(get_feedback_store),
) -> WeeklyReport:
    """Aggregate an arbitrary window without saving or sending anything."""
    default_start, default_end = report_window(datetime.now(timezone.utc), settings.report_window_days)
    start = as_utc(start) if start else default_start
    end = as_utc(end) if end else default_end
    if start >= end:
        raise ValueError("start must be before end")
    return await build_report(feedback_store, start, end)


@router.get("/{report_id}", response_model=WeeklyReport)
async def get_report(
    report_id: str,
    report_store: ReportStore = Depends(get_report_store),
) -> WeeklyReport:
    report = await report_store.load(report_id)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return report
