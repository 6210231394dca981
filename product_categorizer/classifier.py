# ==============================================
# ProductCategoryClassifier - Classification & Learning Engine
# ==============================================
#
# PURPOSE:
#   Suggest a category for a free-text product name and learn from
#   the categories users pick instead of the suggestion.
#
# HOW IT FITS TOGETHER:
#
#   ┌─────────────────────────────────────────────────────┐
#   │              ProductCategoryClassifier              │
#   │                                                     │
#   │   TextNormalizer ──► learned table ──► rules        │
#   │                        ▲    │                       │
#   │                  learn │    │ write-through         │
#   │                        │    ▼                       │
#   │                  LearnedTableStore ─► KeyValueStore │
#   └─────────────────────────────────────────────────────┘
#
# CLASS: ProductCategoryClassifier
# --------------------------------
#
#   Constructor:
#   ------------
#   - __init__(store=None, rules=DEFAULT_RULES, slot_key="learnedCategories",
#              allow_relabel=False)
#       Loads the learned table from the store once. Missing or broken
#       persisted data yields an empty table.
#
#   Public Methods:
#   ---------------
#   - classify(text) -> ClassificationResult
#       1. trimmed length < 2           → ("Genel", 0.1, too_short)
#       2. first token in learned table → min(0.95, count * 0.15 + 0.6), learned
#       3. first rule keyword substring → 0.9 exact / 0.7 substring, rule_based
#       4. otherwise                    → ("Genel", 0.1, no_match)
#
#   - learn(text, category) -> bool
#       For every token longer than 2 characters:
#         new word           → (category, 1)
#         same category      → count + 1
#         different category → unchanged (or relabelled when allow_relabel)
#       Then writes the full table once. Returns False if the write failed;
#       the in-memory table keeps the update either way.
#
#   - learned_entry_count() -> int
#
# ==============================================

import threading
from typing import Dict, Iterable, Optional, Tuple

import structlog

from .analysis.result import (
    DEFAULT_CATEGORY,
    ClassificationMethod,
    ClassificationResult,
    LearnedEntry,
)
from .analysis.rules import DEFAULT_RULES, Rule
from .config import AppConfig, get_config
from .normalization.text_normalizer import TextNormalizer
from .persistence.kv_store import FileStore, InMemoryStore, KeyValueStore, PersistenceError
from .persistence.learned_store import DEFAULT_SLOT_KEY, LearnedTableStore

logger = structlog.get_logger(__name__)


MIN_CLASSIFY_LENGTH = 2
FALLBACK_CONFIDENCE = 0.1
EXACT_RULE_CONFIDENCE = 0.9
SUBSTRING_RULE_CONFIDENCE = 0.7
LEARNED_BASE_CONFIDENCE = 0.6
LEARNED_STEP_CONFIDENCE = 0.15
LEARNED_MAX_CONFIDENCE = 0.95


def learned_confidence(count: int) -> float:
    """Confidence for a learned word seen `count` times, capped at 0.95."""
    return min(LEARNED_MAX_CONFIDENCE, count * LEARNED_STEP_CONFIDENCE + LEARNED_BASE_CONFIDENCE)


def build_store(config: Optional[AppConfig] = None) -> KeyValueStore:
    """Create the key-value store selected by the configuration."""
    config = config or get_config()
    if config.store.backend == "memory":
        return InMemoryStore()
    return FileStore(config.store.storage_dir)


class ProductCategoryClassifier:
    """
    Maps product names to categories and learns from user corrections.

    Learned words take precedence over the static rules so that a user's
    choice overrides the default behaviour for that word.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        rules: Iterable[Rule] = DEFAULT_RULES,
        slot_key: str = DEFAULT_SLOT_KEY,
        allow_relabel: bool = False,
    ):
        """
        Initialize the classifier.

        Args:
            store: Backing key-value store; an InMemoryStore when omitted
            rules: Ordered rules checked after the learned table
            slot_key: Store slot holding the learned table
            allow_relabel: Let a conflicting label replace a learned word's category
        """
        self._rules: Tuple[Rule, ...] = tuple(rules)
        self._allow_relabel = allow_relabel
        self._table_store = LearnedTableStore(store if store is not None else InMemoryStore(), slot_key)
        self._lock = threading.Lock()
        self._learned: Dict[str, LearnedEntry] = self._table_store.load()

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "ProductCategoryClassifier":
        config = config or get_config()
        return cls(
            store=build_store(config),
            slot_key=config.store.slot_key,
            allow_relabel=config.classifier.allow_relabel,
        )

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def allow_relabel(self) -> bool:
        return self._allow_relabel

    # ======================================
    # Classification
    # ======================================
    def classify(self, text: Optional[str]) -> ClassificationResult:
        """
        Suggest a category for a product name.

        Args:
            text: Free-text product name (e.g., "iPhone 14 Pro")

        Returns:
            ClassificationResult with category, confidence and method
        """
        if TextNormalizer.trimmed_length(text) < MIN_CLASSIFY_LENGTH:
            return ClassificationResult(DEFAULT_CATEGORY, FALLBACK_CONFIDENCE, ClassificationMethod.TOO_SHORT)

        clean_name = TextNormalizer.normalize(text)

        for word in clean_name.split():
            entry = self._learned.get(word)
            if entry is not None:
                return ClassificationResult(
                    entry.category,
                    learned_confidence(entry.count),
                    ClassificationMethod.LEARNED,
                )

        for rule in self._rules:
            keyword = rule.first_match(clean_name)
            if keyword is not None:
                confidence = EXACT_RULE_CONFIDENCE if clean_name == keyword else SUBSTRING_RULE_CONFIDENCE
                return ClassificationResult(rule.category, confidence, ClassificationMethod.RULE_BASED)

        return ClassificationResult(DEFAULT_CATEGORY, FALLBACK_CONFIDENCE, ClassificationMethod.NO_MATCH)

    # ======================================
    # Learning
    # ======================================
    def learn(self, text: Optional[str], category: str) -> bool:
        """
        Record that the user filed this product name under `category`.

        Args:
            text: Product name the user typed
            category: Category the user selected

        Returns:
            True if the updated table was persisted, False if the write failed
        """
        if not category or not category.strip():
            raise ValueError("category must not be empty")

        with self._lock:
            added = incremented = skipped = 0
            for word in TextNormalizer.learnable_tokens(text):
                entry = self._learned.get(word)
                if entry is None:
                    self._learned[word] = LearnedEntry(category=category, count=1)
                    added += 1
                elif entry.category == category:
                    entry.count += 1
                    incremented += 1
                elif self._allow_relabel:
                    self._learned[word] = LearnedEntry(category=category, count=1)
                    added += 1
                else:
                    skipped += 1

            logger.info(
                "learned_from_selection",
                category=category,
                added=added,
                incremented=incremented,
                conflicts_ignored=skipped,
            )

            try:
                self._table_store.save(self._learned)
            except PersistenceError as exc:
                logger.warning("learn_persist_failed", error=str(exc), entries=len(self._learned))
                return False
            return True

    def learned_entry_count(self) -> int:
        """Number of distinct learned words."""
        return len(self._learned)

    def learned_entries(self) -> Dict[str, LearnedEntry]:
        """Snapshot of the learned table (copies, safe to mutate)."""
        with self._lock:
            return {
                word: LearnedEntry(category=entry.category, count=entry.count)
                for word, entry in self._learned.items()
            }
