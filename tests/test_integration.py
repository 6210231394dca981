# ==============================================
# Integration Tests
# ==============================================
#
# End-to-end: entry session → learning → file store → restart.
# ==============================================

import pytest

from product_categorizer import (
    CategorySession,
    ClassificationMethod,
    FileStore,
    ProductCategoryClassifier,
)


DECOR = "Ev & Bahçe > Dekorasyon"


class TestRestartRecovery:

    def test_corrections_survive_restart(self, tmp_path):
        store_dir = str(tmp_path / "metadata")

        session = CategorySession(ProductCategoryClassifier(store=FileStore(store_dir)))
        session.update_name("seramik vazo")
        assert session.suggestion == "Genel"
        session.select(DECOR)

        restarted = ProductCategoryClassifier(store=FileStore(store_dir))
        assert restarted.learned_entry_count() == 2
        result = restarted.classify("Seramik Tabak")
        assert result.category == DECOR
        assert result.method == ClassificationMethod.LEARNED
        assert result.confidence == pytest.approx(0.75)

    def test_scenario_walkthrough(self, tmp_path):
        clf = ProductCategoryClassifier(store=FileStore(str(tmp_path)))

        assert clf.classify("iPhone 14 Pro").confidence == pytest.approx(0.7)
        assert clf.classify("iphone").confidence == pytest.approx(0.9)
        assert clf.classify("xyz").method == ClassificationMethod.NO_MATCH

        clf.learn("blue mug", DECOR)
        assert clf.classify("blue").confidence == pytest.approx(0.75)

        clf.learn("blue mug", DECOR)
        clf.learn("blue mug", DECOR)
        result = clf.classify("blue")
        assert result.confidence == pytest.approx(0.95)
        assert result.method == ClassificationMethod.LEARNED

        # confidence is recomputed from the persisted count after a restart
        assert ProductCategoryClassifier(store=FileStore(str(tmp_path))).classify("mug").confidence == pytest.approx(0.95)

    def test_corrupted_file_recovers_and_is_overwritten(self, tmp_path):
        store = FileStore(str(tmp_path))
        store.path_for("learnedCategories").write_bytes(b"{broken")

        clf = ProductCategoryClassifier(store=store)
        assert clf.learned_entry_count() == 0
        assert clf.learn("kupa", DECOR) is True

        assert ProductCategoryClassifier(store=store).learned_entry_count() == 1
