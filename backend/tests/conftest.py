from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from insights.api.deps import get_feedback_store, get_notifier, get_report_store
from insights.main import app
from insights.models.feedback import FeedbackItem
from insights.services.analysis.classifier import classify
from insights.services.notification.base import Notifier
from insights.storage.feedback_store import FeedbackStore
from insights.storage.report_store import ReportStore


class RecordingNotifier(Notifier):
    """Keeps every message in memory instead of delivering it."""

    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.sent: list[tuple[str, str, str]] = []

    @property
    def name(self) -> str:
        return "recording"

    async def notify(self, recipient: str, subject: str, html_body: str) -> bool:
        self.sent.append((recipient, subject, html_body))
        return self.succeed


def _make_item(
    score: int,
    description: str = "Atendimento rápido",
    timestamp: datetime | None = None,
    threshold: int = 3,
) -> FeedbackItem:
    return FeedbackItem(
        description=description,
        score=score,
        urgency=classify(score, threshold),
        timestamp=timestamp or datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_item():
    return _make_item


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(succeed=False)


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Clear the in-memory rate limiter between tests to prevent 429s."""
    from insights.middleware.rate_limit import RateLimitMiddleware

    obj = getattr(app, "middleware_stack", None)
    while obj is not None:
        if isinstance(obj, RateLimitMiddleware):
            obj._requests.clear()
            break
        obj = getattr(obj, "app", None)
    yield


@pytest.fixture
def feedback_store(tmp_path: Path) -> FeedbackStore:
    return FeedbackStore(base_dir=tmp_path / "feedback")


@pytest.fixture
def report_store(tmp_path: Path) -> ReportStore:
    return ReportStore(base_dir=tmp_path / "reports")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
async def client(feedback_store, report_store, notifier) -> AsyncClient:
    app.dependency_overrides[get_feedback_store] = lambda: feedback_store
    app.dependency_overrides[get_report_store] = lambda: report_store
    app.dependency_overrides[get_notifier] = lambda: notifier
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
