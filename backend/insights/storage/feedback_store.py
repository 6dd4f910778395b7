from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from insights.config import settings
from insights.models.feedback import FeedbackItem, as_utc
from insights.storage.base import atomic_write

logger = logging.getLogger(__name__)


class FeedbackStore:
    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir or settings.feedback_dir
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _feedback_path(self, feedback_id: str) -> Path:
        return self.base_dir / f"{feedback_id}.json"

    async def save(self, item: FeedbackItem) -> None:
        atomic_write(self.base_dir, self._feedback_path(item.id), item.model_dump_json(indent=2))
        logger.debug("Saved feedback %s", item.id)

    async def load(self, feedback_id: str) -> FeedbackItem | None:
        path = self._feedback_path(feedback_id)
        if not path.exists():
            return None
        return FeedbackItem.model_validate_json(path.read_text(encoding="utf-8"))

    def _read_all(self) -> list[FeedbackItem]:
        items: list[FeedbackItem] = []
        for path in sorted(self.base_dir.glob("*.json")):
            try:
                items.append(FeedbackItem.model_validate_json(path.read_text(encoding="utf-8")))
            except Exception:
                logger.warning("Skipping unreadable feedback file %s", path.name, exc_info=True)
                continue
        return items

    async def list_all(self) -> list[FeedbackItem]:
        return sorted(self._read_all(), key=lambda item: item.timestamp)

    async def find_by_time_range(self, start: datetime, end: datetime) -> list[FeedbackItem]:
        """Feedback with ``start <= timestamp < end``, oldest first.

        Storage failures are logged and yield an empty list so that report
        generation degrades to an empty window instead of failing.
        """
        start, end = as_utc(start), as_utc(end)
        try:
            items = self._read_all()
        except OSError:
            logger.error("Failed to scan feedback store %s", self.base_dir, exc_info=True)
            return []
        in_window = [item for item in items if start <= item.timestamp < end]
        logger.info("Found %d feedback items between %s and %s", len(in_window), start, end)
        return sorted(in_window, key=lambda item: item.timestamp)

    async def delete(self, feedback_id: str) -> bool:
        path = self._feedback_path(feedback_id)
        if path.exists():
            path.unlink()
            return True
        return False
