# ==============================================
# Tests for Normalization Module
# ==============================================

import pytest

from product_categorizer.normalization import TextNormalizer


class TestTextNormalizer:
    """Lowercasing, trimming and tokenizing product names."""

    def test_lowercases_and_trims(self):
        assert TextNormalizer.normalize("  iPhone 14 Pro  ") == "iphone 14 pro"

    def test_none_is_empty(self):
        assert TextNormalizer.normalize(None) == ""
        assert TextNormalizer.tokenize(None) == []
        assert TextNormalizer.trimmed_length(None) == 0

    def test_trimmed_length_ignores_surrounding_whitespace(self):
        assert TextNormalizer.trimmed_length("   a   ") == 1
        assert TextNormalizer.trimmed_length("ab") == 2

    def test_splits_on_any_whitespace(self):
        assert TextNormalizer.tokenize("Blue\tMug\n  Large") == ["blue", "mug", "large"]

    def test_keeps_repeated_tokens(self):
        assert TextNormalizer.tokenize("mug mug") == ["mug", "mug"]

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("iPhone 14 Pro", ["iphone", "pro"]),
            ("a of the mug", ["the", "mug"]),
            ("xy", []),
        ],
    )
    def test_learnable_tokens_skip_short_words(self, text, expected):
        assert TextNormalizer.learnable_tokens(text) == expected
