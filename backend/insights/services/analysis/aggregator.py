from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import datetime

from insights.models.feedback import FeedbackItem, Urgency
from insights.models.report import RankedTerm, WeeklyReport
from insights.services.analysis.ngrams import phrases_for_text
from insights.services.analysis.ranking import (
    MIN_PHRASE_COUNT,
    MIN_WORD_COUNT,
    TOP_K,
    rank,
)
from insights.services.analysis.tokenizer import tokenize

logger = logging.getLogger(__name__)


def _report_identity(generated_at: datetime | None, report_id: str | None) -> dict:
    identity: dict = {}
    if generated_at is not None:
        identity["generated_at"] = generated_at
    if report_id is not None:
        identity["id"] = report_id
    return identity


def empty_report(
    window_start: datetime,
    window_end: datetime,
    *,
    generated_at: datetime | None = None,
    report_id: str | None = None,
) -> WeeklyReport:
    """Report for a window with no feedback: zeroed numbers, empty rankings."""
    return WeeklyReport(
        window_start=window_start,
        window_end=window_end,
        **_report_identity(generated_at, report_id),
    )


def _ranked_terms(entries: list[tuple[str, int]]) -> tuple[RankedTerm, ...]:
    return tuple(RankedTerm(term=term, count=count) for term, count in entries)


def aggregate(
    items: Sequence[FeedbackItem],
    window_start: datetime,
    window_end: datetime,
    *,
    generated_at: datetime | None = None,
    report_id: str | None = None,
) -> WeeklyReport:
    """Summarize ``items`` collected over ``[window_start, window_end)``.

    Pure: the caller fetches the items and persists the result. Identical
    item sequences give identical statistics and rankings.
    """
    if not items:
        logger.info("No feedback between %s and %s", window_start, window_end)
        return empty_report(
            window_start, window_end, generated_at=generated_at, report_id=report_id
        )

    scores = [item.score for item in items]
    total = len(items)

    count_by_urgency: dict[Urgency, int] = dict(Counter(item.urgency for item in items))
    day_counts = Counter(item.timestamp.date().isoformat() for item in items)
    count_by_day = {day: day_counts[day] for day in sorted(day_counts)}

    descriptions = [item.description for item in items if item.description and item.description.strip()]
    words = [word for text in descriptions for word in tokenize(text)]
    phrases = [phrase for text in descriptions for phrase in phrases_for_text(text)]

    top_words = _ranked_terms(rank(words, MIN_WORD_COUNT, TOP_K))
    top_phrases = _ranked_terms(rank(phrases, MIN_PHRASE_COUNT, TOP_K))

    report = WeeklyReport(
        window_start=window_start,
        window_end=window_end,
        total_count=total,
        average_score=sum(scores) / total,
        max_score=max(scores),
        min_score=min(scores),
        count_by_urgency=count_by_urgency,
        count_by_day=count_by_day,
        top_words=top_words,
        top_phrases=top_phrases,
        **_report_identity(generated_at, report_id),
    )
    logger.info(
        "Aggregated %d feedback items (avg %.2f): %d recurring words, %d recurring phrases",
        total, report.average_score, len(top_words), len(top_phrases),
    )
    return report
