# ==============================================
# CategorySession
# ==============================================
#
# PURPOSE:
#   Drive the classifier from a product entry form: suggest a category
#   while the user types, pre-select confident suggestions, and teach
#   the classifier whenever the user picks something else.
#
# FLOW:
#   update_name("iPhone 14")  → suggestion "Elektronik > Cep Telefonu" (0.7)
#                               not auto-selected (needs > 0.7)
#   select("Elektronik > Tablet")
#                             → differs from the suggestion → learn()
#   accept_suggestion()       → selects the suggestion, nothing learned
#
# Debouncing keystrokes is left to the caller.
#
# ==============================================

from typing import Optional

import structlog

from .analysis.result import ClassificationResult
from .classifier import ProductCategoryClassifier
from .config import ClassifierConfig

logger = structlog.get_logger(__name__)


class CategorySession:
    """State of one product entry: name, suggestion and selected category."""

    def __init__(
        self,
        classifier: ProductCategoryClassifier,
        auto_select_threshold: float = 0.7,
        min_suggest_length: int = 3,
    ):
        self._classifier = classifier
        self.auto_select_threshold = auto_select_threshold
        self.min_suggest_length = min_suggest_length

        self._name = ""
        self._result: Optional[ClassificationResult] = None
        self._selected: Optional[str] = None

    @classmethod
    def from_config(
        cls,
        classifier: ProductCategoryClassifier,
        config: ClassifierConfig,
    ) -> "CategorySession":
        return cls(
            classifier,
            auto_select_threshold=config.auto_select_threshold,
            min_suggest_length=config.min_suggest_length,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def result(self) -> Optional[ClassificationResult]:
        return self._result

    @property
    def suggestion(self) -> Optional[str]:
        return self._result.category if self._result else None

    @property
    def confidence(self) -> float:
        return self._result.confidence if self._result else 0.0

    @property
    def selected_category(self) -> Optional[str]:
        return self._selected

    def update_name(self, name: str) -> Optional[ClassificationResult]:
        """
        Re-classify after the product name changed.

        Names shorter than min_suggest_length clear the suggestion.
        A suggestion above the auto-select threshold becomes the selection.
        """
        self._name = name or ""

        if len(self._name) < self.min_suggest_length:
            self._result = None
            return None

        self._result = self._classifier.classify(self._name)
        if self._result.confidence > self.auto_select_threshold:
            self._selected = self._result.category
        return self._result

    def select(self, category: str) -> bool:
        """
        Select a category.

        Returns:
            True if the selection taught the classifier something
        """
        self._selected = category

        if self.suggestion and category != self.suggestion and self._name:
            persisted = self._classifier.learn(self._name, category)
            if not persisted:
                logger.warning("selection_not_persisted", category=category)
            return True
        return False

    def accept_suggestion(self) -> Optional[str]:
        """Select the current suggestion, if there is one."""
        if self.suggestion is None:
            return None
        self.select(self.suggestion)
        return self._selected

    def clear_selection(self) -> None:
        self._selected = None
