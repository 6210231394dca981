# ==============================================
# PERSISTENCE (Learned state across restarts)
# ==============================================
#
# This package keeps the classifier's learned table in a
# key-value store so user corrections survive restarts.
#
# Modules:
# --------
# - kv_store.py       → Byte slot stores (in-memory, file-backed)
# - learned_store.py  → JSON codec for the learned table in one slot
#
# ==============================================

from .kv_store import FileStore, InMemoryStore, KeyValueStore, PersistenceError
from .learned_store import DEFAULT_SLOT_KEY, LearnedTableStore

__all__ = [
    "DEFAULT_SLOT_KEY",
    "FileStore",
    "InMemoryStore",
    "KeyValueStore",
    "LearnedTableStore",
    "PersistenceError",
]
