# ==============================================
# Tests for Rules & Result Types
# ==============================================

import pytest

from product_categorizer.analysis import (
    CATEGORY_CATALOG,
    DEFAULT_RULES,
    ClassificationMethod,
    ClassificationResult,
    ConfidenceLevel,
    LearnedEntry,
    Rule,
    is_known_category,
    split_category,
)


class TestRule:

    def test_from_pattern_keeps_order(self):
        rule = Rule.from_pattern("ipad|tablet", "Elektronik > Tablet")
        assert rule.keywords == ("ipad", "tablet")

    def test_keywords_become_tuple(self):
        rule = Rule(["b", "a"], "X")
        assert rule.keywords == ("b", "a")

    def test_keywords_are_lowercased(self):
        rule = Rule(("iPhone", "GALAXY"), "Elektronik > Cep Telefonu")
        assert rule.keywords == ("iphone", "galaxy")
        assert rule.first_match("samsung galaxy s23") == "galaxy"

    def test_first_match(self):
        rule = Rule(("kitap", "roman"), "Kitap & Medya")
        assert rule.first_match("polisiye roman kitap") == "kitap"
        assert rule.first_match("dergi") is None

    @pytest.mark.parametrize(
        "keywords, category",
        [((), "X"), (("ok", ""), "X"), (("ok",), "")],
    )
    def test_invalid_rules_rejected(self, keywords, category):
        with pytest.raises(ValueError):
            Rule(keywords, category)

    def test_default_rules_are_ordered(self):
        assert DEFAULT_RULES[0].category == "Elektronik > Cep Telefonu"
        assert DEFAULT_RULES[-1].category == "Otomotiv"
        assert len(DEFAULT_RULES) == 12

    def test_rule_categories_are_in_catalog(self):
        for rule in DEFAULT_RULES:
            assert is_known_category(rule.category)


class TestCatalog:

    def test_catalog_ends_with_default(self):
        assert CATEGORY_CATALOG[-1] == "Genel"
        assert len(CATEGORY_CATALOG) == 18

    def test_split_hierarchical(self):
        assert split_category("Ev & Bahçe > Mobilya") == ("Ev & Bahçe", "Mobilya")

    def test_split_top_level(self):
        assert split_category("Otomotiv") == ("Otomotiv", None)

    def test_unknown_category(self):
        assert not is_known_category("Uzay > Roket")


class TestClassificationResult:

    @pytest.mark.parametrize(
        "confidence, level",
        [(0.95, ConfidenceLevel.HIGH), (0.7, ConfidenceLevel.MEDIUM),
         (0.41, ConfidenceLevel.MEDIUM), (0.4, ConfidenceLevel.LOW), (0.1, ConfidenceLevel.LOW)],
    )
    def test_confidence_bands(self, confidence, level):
        result = ClassificationResult("Genel", confidence, ClassificationMethod.NO_MATCH)
        assert result.level == level

    def test_percent(self):
        result = ClassificationResult("Otomotiv", 0.7, ClassificationMethod.RULE_BASED)
        assert result.percent == "70.0%"

    def test_to_dict(self):
        result = ClassificationResult("Otomotiv", 0.9, ClassificationMethod.RULE_BASED)
        assert result.to_dict() == {"category": "Otomotiv", "confidence": 0.9, "method": "rule_based"}

    def test_is_match(self):
        assert ClassificationResult("X", 0.75, ClassificationMethod.LEARNED).is_match
        assert not ClassificationResult("Genel", 0.1, ClassificationMethod.TOO_SHORT).is_match

    @pytest.mark.parametrize("confidence", [-0.1, 1.1])
    def test_confidence_out_of_range(self, confidence):
        with pytest.raises(ValueError):
            ClassificationResult("Genel", confidence, ClassificationMethod.NO_MATCH)


class TestLearnedEntry:

    def test_round_trip(self):
        entry = LearnedEntry("Otomotiv", 3)
        assert LearnedEntry.from_dict(entry.to_dict()) == entry

    @pytest.mark.parametrize(
        "data",
        [
            {"category": "X", "count": 0},
            {"category": "X", "count": "2"},
            {"category": "X", "count": True},
            {"category": "", "count": 1},
            {"count": 1},
            ["X", 1],
        ],
    )
    def test_invalid_data(self, data):
        with pytest.raises(ValueError):
            LearnedEntry.from_dict(data)
