# ==============================================
# Product Categorizer
# ==============================================
#
# Package Structure:
#
# product_categorizer/
# ├── normalization/    # Lowercase / trim / tokenize product names
# ├── analysis/         # Rules, category catalog, result types
# ├── persistence/      # Key-value stores + learned table codec
# ├── classifier.py     # Classification & learning engine
# ├── session.py        # Suggest / select / learn flow for entry forms
# ├── config.py         # Configuration + logging setup
# └── cli.py            # Command line entry point
#
# ==============================================

from .analysis import (
    CATEGORY_CATALOG,
    DEFAULT_CATEGORY,
    DEFAULT_RULES,
    ClassificationMethod,
    ClassificationResult,
    ConfidenceLevel,
    LearnedEntry,
    Rule,
)
from .classifier import ProductCategoryClassifier
from .persistence import FileStore, InMemoryStore, KeyValueStore, PersistenceError
from .session import CategorySession

__version__ = "0.1.0"

__all__ = [
    "CATEGORY_CATALOG",
    "DEFAULT_CATEGORY",
    "DEFAULT_RULES",
    "CategorySession",
    "ClassificationMethod",
    "ClassificationResult",
    "ConfidenceLevel",
    "FileStore",
    "InMemoryStore",
    "KeyValueStore",
    "LearnedEntry",
    "PersistenceError",
    "ProductCategoryClassifier",
    "Rule",
]
