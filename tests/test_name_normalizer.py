"""Tests for name normalization."""

from dedup.name_normalizer import normalize, reverse_tokens, tokenize


class TestNormalize:
    def test_lowercases_and_trims(self):
        assert normalize("  Ali VALIYEV ") == "ali valiyev"

    def test_punctuation_becomes_space(self):
        """Apostrophes, dots, hyphens and underscores split tokens."""
        assert normalize("O'Brien-Smith, J._R.") == "o brien smith j r"

    def test_collapses_whitespace(self):
        assert normalize("Ali\t\t  Valiyev\n") == "ali valiyev"

    def test_unicode_letters_kept(self):
        """Cyrillic and accented letters are letters, not punctuation."""
        assert normalize("Алишер  Ўринов") == "алишер ўринов"
        assert normalize("José Núñez") == "josé núñez"

    def test_casefold(self):
        """Unicode case folding, not just lower()."""
        assert normalize("STRASSE") == normalize("Straße")

    def test_digits_kept(self):
        assert normalize("Ali 2nd") == "ali 2nd"

    def test_empty_inputs(self):
        assert normalize(None) == ""
        assert normalize("") == ""
        assert normalize("  !!! ") == ""


class TestTokenize:
    def test_tokens_in_order(self):
        assert tokenize("Ali  Valiyev-Karimov") == ["ali", "valiyev", "karimov"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize(None) == []
        assert tokenize("--") == []

    def test_reverse_tokens(self):
        assert reverse_tokens("Ali Valiyev") == "valiyev ali"
        assert reverse_tokens("") == ""
