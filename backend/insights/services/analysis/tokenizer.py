from __future__ import annotations

import unicodedata

MIN_WORD_LENGTH = 3

# Portuguese function words (articles, prepositions, conjunctions, pronouns)
STOP_WORDS: frozenset[str] = frozenset({
    "a", "o", "e", "de", "do", "da", "em", "um", "uma", "para", "com", "não",
    "é", "que", "se", "na", "por", "mais", "as", "os", "como", "mas", "foi",
    "ao", "ele", "das", "tem", "à", "seu", "sua", "ou", "ser", "quando",
    "muito", "há", "nos", "já", "está", "eu", "também", "só", "pelo", "pela",
    "até", "isso", "ela", "entre", "era", "depois", "sem", "mesmo", "aos",
    "ter", "seus", "suas", "numa", "pelos", "pelas", "num", "nem",
    "meu", "às", "minha", "têm",
})


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS


def _strip_non_letters(text: str) -> str:
    return "".join(ch if ch.isalpha() or ch.isspace() else " " for ch in text)


def split_words(text: str | None) -> list[str]:
    """Lowercase words of ``text`` with every non-letter treated as a separator.

    No length or stop-word filtering: phrase extraction works on this stream.
    """
    if not text or not text.strip():
        return []
    # Decomposed accents (combining marks) are not letters on their own
    cleaned = _strip_non_letters(unicodedata.normalize("NFC", text))
    return [word.lower() for word in cleaned.split()]


def tokenize(text: str | None) -> list[str]:
    """Words of ``text`` eligible for frequency ranking, in text order.

    Drops words shorter than ``MIN_WORD_LENGTH`` and stop words; duplicates
    are kept.
    """
    return [
        word
        for word in split_words(text)
        if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS
    ]
