# ==============================================
# Result (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of classification and
#   the learned state the classifier accumulates.
#
# ENUMS:
# ------
# - ClassificationMethod(Enum): LEARNED, RULE_BASED, TOO_SHORT, NO_MATCH
#     How a suggestion was derived.
#
# - ConfidenceLevel(Enum): HIGH, MEDIUM, LOW
#     Coarse band used to present a confidence score.
#       HIGH   → confidence > 0.7
#       MEDIUM → confidence > 0.4
#       LOW    → everything else
#
# CLASSES:
# --------
# - ClassificationResult (dataclass, frozen)
#     - category: str
#     - confidence: float            → 0.0 - 1.0, not a calibrated probability
#     - method: ClassificationMethod
#
# - LearnedEntry (dataclass)
#     - category: str
#     - count: int                   → always >= 1
#
#     Methods:
#     --------
#     - to_dict() -> dict            → Serialize for persistence
#     - from_dict(data: dict) -> LearnedEntry  (classmethod) → Deserialize
#
# ==============================================

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


DEFAULT_CATEGORY = "Genel"


class ClassificationMethod(str, Enum):
    """Provenance of a classification result."""
    LEARNED = "learned"
    RULE_BASED = "rule_based"
    TOO_SHORT = "too_short"
    NO_MATCH = "no_match"


class ConfidenceLevel(str, Enum):
    """Presentation band for a confidence score."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_confidence(cls, confidence: float) -> "ConfidenceLevel":
        if confidence > 0.7:
            return cls.HIGH
        if confidence > 0.4:
            return cls.MEDIUM
        return cls.LOW


@dataclass(frozen=True)
class ClassificationResult:
    """
    A single category suggestion for a product name.

    Produced fresh on every classify() call and never stored.
    """

    category: str
    confidence: float
    method: ClassificationMethod

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence out of range: {self.confidence}")

    @property
    def level(self) -> ConfidenceLevel:
        return ConfidenceLevel.from_confidence(self.confidence)

    @property
    def percent(self) -> str:
        """Confidence as a percentage with one decimal, e.g. "70.0%"."""
        return f"{self.confidence * 100:.1f}%"

    @property
    def is_match(self) -> bool:
        """True when a rule or learned word produced this result."""
        return self.method in (
            ClassificationMethod.LEARNED,
            ClassificationMethod.RULE_BASED,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "confidence": self.confidence,
            "method": self.method.value,
        }


@dataclass
class LearnedEntry:
    """A word-to-category association derived from user feedback."""

    category: str
    count: int = 1

    def __post_init__(self):
        if not isinstance(self.category, str) or not self.category:
            raise ValueError("category must be a non-empty string")
        # bool is an int subclass; reject it explicitly
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise ValueError(f"count must be an integer >= 1, got {self.count!r}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the entry for the persisted learned table.

        Returns:
            {"category": ..., "count": ...}
        """
        return {"category": self.category, "count": self.count}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LearnedEntry":
        """
        Reconstruct an entry from stored data.

        Raises:
            ValueError: If the data is not a mapping with a valid category/count
        """
        if not isinstance(data, dict):
            raise ValueError(f"learned entry must be an object, got {type(data).__name__}")
        return cls(category=data.get("category"), count=data.get("count"))
