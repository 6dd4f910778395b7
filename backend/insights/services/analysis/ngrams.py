from __future__ import annotations

from collections.abc import Sequence

from insights.services.analysis.tokenizer import STOP_WORDS, split_words


def extract_phrases(words: Sequence[str]) -> list[str]:
    """Bigrams followed by trigrams of ``words``, in text order.

    A bigram is kept only when neither word is a stop word. A trigram is
    dropped only when all three words are stop words, so phrases such as
    "não gostou do" survive.
    """
    lowered = [w.lower() for w in words]
    if len(lowered) < 2:
        return []

    phrases: list[str] = []

    for first, second in zip(lowered, lowered[1:]):
        if first not in STOP_WORDS and second not in STOP_WORDS:
            phrases.append(f"{first} {second}")

    for first, second, third in zip(lowered, lowered[1:], lowered[2:]):
        if not (first in STOP_WORDS and second in STOP_WORDS and third in STOP_WORDS):
            phrases.append(f"{first} {second} {third}")

    return phrases


def phrases_for_text(text: str | None) -> list[str]:
    return extract_phrases(split_words(text))
