# ==============================================
# Rules & Category Catalog
# ==============================================
#
# PURPOSE:
#   The static keyword → category table the classifier falls back to
#   when no learned word matches, plus the catalog of categories a
#   user can pick from.
#
# ORDERING:
#   Rules are checked in declaration order and the keyword alternatives
#   of a rule in their own declaration order. The first alternative that
#   is a substring of the normalized product name wins, so both levels
#   are tuples, never sets.
#
#   Matching is substring based, not word based: "bot" also matches
#   "robot" and "pc" matches "pcie". That is the intended behaviour.
#
# CLASSES:
# --------
# - Rule (dataclass, frozen)
#     keywords: tuple[str, ...]
#     category: str
#
# CONSTANTS:
# ----------
# - DEFAULT_RULES: tuple[Rule, ...]
# - CATEGORY_CATALOG: tuple[str, ...]
#
# FUNCTIONS:
# ----------
# - split_category(label) -> (parent, child | None)
# - is_known_category(label) -> bool
#
# ==============================================

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .result import DEFAULT_CATEGORY


CATEGORY_SEPARATOR = " > "


@dataclass(frozen=True)
class Rule:
    """Ordered keyword alternatives mapped to one category label."""

    keywords: Tuple[str, ...]
    category: str

    def __post_init__(self):
        # Stored as an ordered, lowercased tuple to line up with normalized text
        object.__setattr__(self, "keywords", tuple(keyword.lower() for keyword in self.keywords))
        if not self.keywords:
            raise ValueError(f"rule for {self.category!r} has no keywords")
        if any(not keyword for keyword in self.keywords):
            raise ValueError(f"rule for {self.category!r} has an empty keyword")
        if not self.category:
            raise ValueError("rule category must not be empty")

    @classmethod
    def from_pattern(cls, pattern: str, category: str) -> "Rule":
        """Build a rule from a "kw1|kw2|kw3" alternatives string."""
        return cls(keywords=tuple(pattern.split("|")), category=category)

    def first_match(self, normalized_text: str) -> Optional[str]:
        """Return the first keyword contained in the text, if any."""
        for keyword in self.keywords:
            if keyword in normalized_text:
                return keyword
        return None


DEFAULT_RULES: Tuple[Rule, ...] = (
    Rule.from_pattern("iphone|samsung|xiaomi|huawei|telefon|phone", "Elektronik > Cep Telefonu"),
    Rule.from_pattern("macbook|laptop|bilgisayar|computer|pc", "Elektronik > Bilgisayar"),
    Rule.from_pattern("ipad|tablet", "Elektronik > Tablet"),
    Rule.from_pattern("playstation|xbox|konsol|ps5", "Elektronik > Oyun Konsolu"),
    Rule.from_pattern("airpods|kulaklık|headphone", "Elektronik > Ses Sistemleri"),
    Rule.from_pattern("tişört|t-shirt|gömlek", "Giyim > Üst Giyim"),
    Rule.from_pattern("pantolon|jean|şort", "Giyim > Alt Giyim"),
    Rule.from_pattern("ayakkabı|nike|adidas|bot", "Giyim > Ayakkabı"),
    Rule.from_pattern("çanta|bag|sırt çantası", "Giyim > Çanta & Aksesuar"),
    Rule.from_pattern("masa|sandalye|koltuk", "Ev & Bahçe > Mobilya"),
    Rule.from_pattern("kitap|roman|dergi", "Kitap & Medya"),
    Rule.from_pattern("araba|bmw|mercedes|audi", "Otomotiv"),
)


# Every category a user may pick, in display order
CATEGORY_CATALOG: Tuple[str, ...] = (
    "Elektronik > Cep Telefonu",
    "Elektronik > Bilgisayar",
    "Elektronik > Tablet",
    "Elektronik > Oyun Konsolu",
    "Elektronik > Ses Sistemleri",
    "Elektronik > Televizyon",
    "Giyim > Üst Giyim",
    "Giyim > Alt Giyim",
    "Giyim > Ayakkabı",
    "Giyim > Çanta & Aksesuar",
    "Ev & Bahçe > Mobilya",
    "Ev & Bahçe > Dekorasyon",
    "Spor > Fitness",
    "Spor > Outdoor",
    "Kitap & Medya",
    "Otomotiv",
    "Sağlık & Kozmetik",
    DEFAULT_CATEGORY,
)


def split_category(label: str) -> Tuple[str, Optional[str]]:
    """
    Split a "Parent > Child" label.

    Returns:
        (parent, child) or (label, None) for a bare top-level label
    """
    parent, sep, child = label.partition(CATEGORY_SEPARATOR)
    if not sep:
        return label.strip(), None
    return parent.strip(), child.strip()


def is_known_category(label: str, catalog: Iterable[str] = CATEGORY_CATALOG) -> bool:
    return label in tuple(catalog)
