from __future__ import annotations

import logging
from pathlib import Path

from insights.config import settings
from insights.models.report import WeeklyReport
from insights.storage.base import atomic_write

logger = logging.getLogger(__name__)


class ReportStore:
    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir or settings.reports_dir
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _report_path(self, report_id: str) -> Path:
        return self.base_dir / f"{report_id}.json"

    async def save(self, report: WeeklyReport) -> None:
        atomic_write(self.base_dir, self._report_path(report.id), report.model_dump_json(indent=2))
        logger.info("Saved weekly report %s", report.id)

    async def load(self, report_id: str) -> WeeklyReport | None:
        path = self._report_path(report_id)
        if not path.exists():
            return None
        return WeeklyReport.model_validate_json(path.read_text(encoding="utf-8"))

    async def list_reports(self) -> list[WeeklyReport]:
        """All stored reports, most recently generated first."""
        reports: list[WeeklyReport] = []
        for path in self.base_dir.glob("*.json"):
            try:
                reports.append(WeeklyReport.model_validate_json(path.read_text(encoding="utf-8")))
            except Exception:
                continue
        return sorted(reports, key=lambda r: r.generated_at, reverse=True)

    async def latest(self) -> WeeklyReport | None:
        reports = await self.list_reports()
        return reports[0] if reports else None
