# ==============================================
# TextNormalizer
# ==============================================
#
# PURPOSE:
#   Bring a raw product name into the single canonical form that
#   both classification and learning operate on.
#
# RULES:
# ------
#   1. None is treated as the empty string
#   2. Lowercase, then trim surrounding whitespace
#   3. Tokens are split on any run of whitespace (tabs, newlines, spaces)
#   4. Repeated tokens are kept (no de-duplication)
#
# CLASS: TextNormalizer
# ---------------------
#   Stateless utility class.
#
#   Methods:
#   --------
#   - trimmed_length(text: str | None) -> int
#   - normalize(text: str | None) -> str
#   - tokenize(text: str | None) -> list[str]
#   - learnable_tokens(text: str | None, min_length: int = 3) -> list[str]
#
# ==============================================

from typing import List, Optional


class TextNormalizer:
    """Lowercases, trims and tokenizes free-text product names."""

    # Words shorter than this are never learned ("a", "14", "of")
    MIN_LEARNABLE_LENGTH = 3

    @staticmethod
    def trimmed_length(text: Optional[str]) -> int:
        """Length of the input after stripping surrounding whitespace."""
        if not text:
            return 0
        return len(text.strip())

    @staticmethod
    def normalize(text: Optional[str]) -> str:
        """
        Lowercase and trim a product name.

        Args:
            text: Raw product name (e.g., "  iPhone 14 Pro ")

        Returns:
            Canonical form (e.g., "iphone 14 pro")
        """
        if not text:
            return ""
        return text.lower().strip()

    @classmethod
    def tokenize(cls, text: Optional[str]) -> List[str]:
        """Split the normalized text on whitespace, preserving order."""
        return cls.normalize(text).split()

    @classmethod
    def learnable_tokens(
        cls,
        text: Optional[str],
        min_length: int = MIN_LEARNABLE_LENGTH,
    ) -> List[str]:
        """
        Tokens long enough to be stored in the learned table.

        Args:
            text: Raw product name
            min_length: Minimum token length (default 3, i.e. length > 2)

        Returns:
            Tokens in text order, duplicates included
        """
        return [token for token in cls.tokenize(text) if len(token) >= min_length]
