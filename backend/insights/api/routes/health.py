from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from fastapi import APIRouter

from insights.config import settings

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.get("/health/detail")
async def health_detail() -> dict:
    """Detailed health check for storage, notifications and the report schedule."""
    return {
        "backend": {"status": "ok"},
        "feedback_store": _check_dir(settings.feedback_dir),
        "report_store": _check_dir(settings.reports_dir),
        "notifications": _check_notifications(),
        "schedule": _check_schedule(),
    }


def _check_dir(path) -> dict:
    if not path.exists():
        return {"status": "missing", "path": str(path)}
    if not os.access(path, os.W_OK):
        return {"status": "read_only", "path": str(path)}
    return {"status": "ok", "path": str(path)}


def _check_notifications() -> dict:
    if settings.sendgrid_api_key:
        return {"status": "configured", "provider": "sendgrid", "recipient": settings.admin_email}
    return {
        "status": "log_only",
        "provider": "log",
        "message": "No SendGrid API key set; notifications are logged",
    }


def _check_schedule() -> dict:
    if not settings.report_schedule_enabled:
        return {"status": "disabled"}
    from insights.services.reporting.schedule import next_run_after

    next_run = next_run_after(datetime.now(timezone.utc), settings.report_weekday, settings.report_hour)
    return {"status": "enabled", "next_run": next_run.isoformat()}
