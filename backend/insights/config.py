from __future__ import annotations

import os
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Feedback Insights"
    debug: bool = False

    # Storage
    feedback_dir: Path = Path(os.path.expanduser("~/.feedback-insights/feedback"))
    reports_dir: Path = Path(os.path.expanduser("~/.feedback-insights/reports"))

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    # Classification
    critical_threshold: int = 3
    max_description_chars: int = 5000

    # Weekly report
    report_window_days: int = 7
    report_schedule_enabled: bool = True
    report_weekday: int = 0  # Monday
    report_hour: int = 9  # UTC

    # Notifications (SendGrid v3 API; empty key = log only)
    sendgrid_api_key: str = ""
    sendgrid_base_url: str = "https://api.sendgrid.com/v3"
    sender_email: str = "noreply@feedback-insights.local"
    admin_email: str = "admin@feedback-insights.local"
    notification_timeout: float = 10.0

    # Rate limiting
    rate_limit_requests: int = 60
    rate_limit_window: int = 60

    # Request size limit (bytes)
    max_upload_size: int = 1024 * 1024  # 1MB

    model_config = {"env_prefix": "FEEDBACK_INSIGHTS_"}


settings = Settings()
