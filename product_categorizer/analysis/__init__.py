# ==============================================
# ANALYSIS: RULES & RESULTS
# ==============================================
#
# Static knowledge and output types used by the classifier.
#
# Modules:
# --------
# - rules.py   → Ordered keyword rules and the category catalog
# - result.py  → ClassificationResult, LearnedEntry and the enums
#
# ==============================================

from .result import (
    DEFAULT_CATEGORY,
    ClassificationMethod,
    ClassificationResult,
    ConfidenceLevel,
    LearnedEntry,
)
from .rules import (
    CATEGORY_CATALOG,
    DEFAULT_RULES,
    Rule,
    is_known_category,
    split_category,
)

__all__ = [
    "CATEGORY_CATALOG",
    "DEFAULT_CATEGORY",
    "DEFAULT_RULES",
    "ClassificationMethod",
    "ClassificationResult",
    "ConfidenceLevel",
    "LearnedEntry",
    "Rule",
    "is_known_category",
    "split_category",
]
