# ==============================================
# LearnedTableStore
# ==============================================
#
# PURPOSE:
#   Serialize the learned word → category table into a single store
#   slot and read it back, so corrections survive process restarts.
#
# SLOT FORMAT (UTF-8 JSON):
# -------------------------
#   {
#     "blue": {"category": "Ev & Bahçe > Dekorasyon", "count": 3},
#     "mug":  {"category": "Ev & Bahçe > Dekorasyon", "count": 3}
#   }
#
# LOADING NEVER FAILS:
#   - absent slot                  → empty table
#   - unreadable slot / bad JSON   → empty table + warning
#   - top level is not an object   → empty table + warning
#   - a single invalid entry       → that entry is dropped + warning
#
# SAVING:
#   Always writes the whole table (overwrite, not append).
#   Raises PersistenceError when the store rejects the write.
#
# ==============================================

import json
from typing import Dict

import structlog

from ..analysis.result import LearnedEntry
from .kv_store import KeyValueStore, PersistenceError

logger = structlog.get_logger(__name__)


DEFAULT_SLOT_KEY = "learnedCategories"


class LearnedTableStore:
    """Reads and writes the learned table in one named slot."""

    def __init__(self, store: KeyValueStore, slot_key: str = DEFAULT_SLOT_KEY):
        self.store = store
        self.slot_key = slot_key

    def load(self) -> Dict[str, LearnedEntry]:
        """
        Load the learned table.

        Returns:
            Dictionary mapping word -> LearnedEntry, empty if nothing usable is stored
        """
        try:
            raw = self.store.get(self.slot_key)
        except PersistenceError as exc:
            logger.warning("learned_table_unreadable", slot=self.slot_key, error=str(exc))
            return {}

        if raw is None:
            logger.info("learned_table_absent", slot=self.slot_key)
            return {}

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            logger.warning("learned_table_malformed", slot=self.slot_key, error=str(exc))
            return {}

        if not isinstance(data, dict):
            logger.warning(
                "learned_table_malformed",
                slot=self.slot_key,
                error=f"expected an object, got {type(data).__name__}",
            )
            return {}

        table: Dict[str, LearnedEntry] = {}
        for word, value in data.items():
            try:
                table[word] = LearnedEntry.from_dict(value)
            except ValueError as exc:
                logger.warning("learned_entry_dropped", slot=self.slot_key, word=word, error=str(exc))

        logger.info("learned_table_loaded", slot=self.slot_key, entries=len(table))
        return table

    def save(self, table: Dict[str, LearnedEntry]) -> None:
        """
        Overwrite the slot with the full table.

        Raises:
            PersistenceError: If the underlying store cannot be written
        """
        payload = {word: entry.to_dict() for word, entry in table.items()}
        raw = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        self.store.set(self.slot_key, raw)
        logger.debug("learned_table_saved", slot=self.slot_key, entries=len(table))

    def clear(self) -> None:
        """Delete the persisted table (for testing or reset)."""
        self.store.delete(self.slot_key)
        logger.info("learned_table_cleared", slot=self.slot_key)
