# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - memory_store        → empty InMemoryStore
# - file_store          → FileStore rooted in tmp_path
# - classifier          → classifier backed by memory_store
# - isolated_config     → (autouse) clean env + config singleton per test
#
# ==============================================

import pytest
import structlog

from product_categorizer import config as config_module
from product_categorizer.classifier import ProductCategoryClassifier
from product_categorizer.persistence import FileStore, InMemoryStore


ENV_VARS = (
    "CATEGORIZER_STORE_BACKEND",
    "CATEGORIZER_STORAGE_DIR",
    "CATEGORIZER_SLOT_KEY",
    "CATEGORIZER_ALLOW_RELABEL",
    "CATEGORIZER_AUTO_SELECT_THRESHOLD",
    "CATEGORIZER_MIN_SUGGEST_LENGTH",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Start every test from default configuration and logging."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()
    structlog.reset_defaults()


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return FileStore(str(tmp_path / "metadata"))


@pytest.fixture
def classifier(memory_store):
    return ProductCategoryClassifier(store=memory_store)
