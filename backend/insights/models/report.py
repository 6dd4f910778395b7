from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from insights.models.feedback import Urgency


class RankedTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    count: int = Field(ge=1)


class WeeklyReport(BaseModel):
    """Statistical and lexical summary of the feedback in ``[window_start, window_end)``.

    Fully read-only once built: count maps are mapping proxies and rankings
    are tuples.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    window_start: datetime
    window_end: datetime
    total_count: int = Field(default=0, ge=0)
    average_score: float = 0.0
    max_score: int = 0
    min_score: int = 0
    count_by_urgency: Mapping[Urgency, int] = Field(default_factory=dict, validate_default=True)
    count_by_day: Mapping[str, int] = Field(default_factory=dict, validate_default=True)
    top_words: tuple[RankedTerm, ...] = ()
    top_phrases: tuple[RankedTerm, ...] = ()

    @field_validator("count_by_urgency", "count_by_day")
    @classmethod
    def _read_only_counts(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @field_serializer("count_by_urgency", "count_by_day")
    def _counts_as_dict(self, value: Mapping) -> dict:
        return dict(value)
