from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

TOP_K = 10
MIN_WORD_COUNT = 1
MIN_PHRASE_COUNT = 2


def rank(items: Iterable[str], min_count: int, top_k: int) -> list[tuple[str, int]]:
    """Top ``top_k`` most frequent items with at least ``min_count`` occurrences.

    Sorted by count descending. Equal counts keep the order in which the
    items were first seen in ``items``.
    """
    if top_k <= 0:
        return []
    counts = Counter(items)
    # sorted() is stable and Counter preserves insertion order
    ranked = sorted(
        ((item, count) for item, count in counts.items() if count >= min_count),
        key=lambda entry: entry[1],
        reverse=True,
    )
    return ranked[:top_k]
