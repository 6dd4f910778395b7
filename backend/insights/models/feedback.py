from __future__ import annotations

import enum
from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from insights.config import settings


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Urgency(str, enum.Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    NORMAL = "NORMAL"


class FeedbackSubmission(BaseModel):
    """Candidate feedback as received from a client, before classification."""

    description: str = Field(min_length=1)
    score: int = Field(ge=0, le=10)

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be blank")
        if len(value) > settings.max_description_chars:
            raise ValueError(
                f"description must be at most {settings.max_description_chars} characters"
            )
        return value


class FeedbackItem(BaseModel):
    """A classified, persisted feedback submission.

    Built once at ingestion and never modified afterwards: the urgency always
    matches the score under the threshold in force when it was ingested.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    description: str
    score: int = Field(ge=0, le=10)
    urgency: Urgency
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("timestamp")
    @classmethod
    def _utc_timestamp(cls, value: datetime) -> datetime:
        return as_utc(value)
