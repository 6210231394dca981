# ==============================================
# NORMALIZATION
# ==============================================
#
# This package turns raw product names into the canonical
# lowercase, whitespace-tokenized form used by the classifier
# for both lookups and learning.
#
# Modules:
# --------
# - text_normalizer.py → Lowercase, trim and split product names
#
# ==============================================

from .text_normalizer import TextNormalizer

__all__ = ["TextNormalizer"]
