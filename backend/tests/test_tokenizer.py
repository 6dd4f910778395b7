import unicodedata

from insights.services.analysis.tokenizer import (
    MIN_WORD_LENGTH,
    STOP_WORDS,
    is_stop_word,
    split_words,
    tokenize,
)


class TestSplitWords:
    def test_empty_and_none(self):
        assert split_words("") == []
        assert split_words(None) == []
        assert split_words("   \n\t ") == []

    def test_punctuation_becomes_separator(self):
        assert split_words("bom,atendimento!rápido") == ["bom", "atendimento", "rápido"]

    def test_digits_are_not_letters(self):
        assert split_words("entrega em 3dias") == ["entrega", "em", "dias"]

    def test_lowercases_and_keeps_short_words(self):
        assert split_words("O Produto É Bom") == ["o", "produto", "é", "bom"]

    def test_decomposed_accents_are_kept(self):
        decomposed = unicodedata.normalize("NFD", "Ótimo serviço")
        assert split_words(decomposed) == ["ótimo", "serviço"]


class TestTokenize:
    def test_empty_and_none(self):
        assert tokenize("") == []
        assert tokenize(None) == []

    def test_accented_sentence(self):
        assert tokenize("Ótimo atendimento, voltarei!") == ["ótimo", "atendimento", "voltarei"]

    def test_drops_short_words(self):
        assert tokenize("ok tv bom") == ["bom"]
        assert MIN_WORD_LENGTH == 3

    def test_drops_stop_words(self):
        assert tokenize("Não gostou do produto para casa") == ["gostou", "produto", "casa"]

    def test_keeps_duplicates_in_order(self):
        assert tokenize("demora demora, muita demora") == ["demora", "demora", "muita", "demora"]

    def test_only_noise(self):
        assert tokenize("!!! 123 ??? ...") == []


class TestStopWords:
    def test_contains_common_function_words(self):
        for word in ("a", "o", "e", "de", "não", "para", "com", "muito"):
            assert word in STOP_WORDS

    def test_is_stop_word_ignores_case(self):
        assert is_stop_word("Não")
        assert not is_stop_word("produto")
