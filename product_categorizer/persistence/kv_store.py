# ==============================================
# Key-Value Stores
# ==============================================
#
# PURPOSE:
#   The durable backing copy of the classifier's learned table.
#   A store is a flat mapping of named slots to raw bytes; it knows
#   nothing about what the bytes mean.
#
# CLASSES:
# --------
# - PersistenceError(Exception)
#     Raised when a slot cannot be read or written.
#
# - KeyValueStore (abstract)
#     - get(key: str) -> bytes | None     → None when the slot is absent
#     - set(key: str, value: bytes) -> None  → overwrite the slot
#     - delete(key: str) -> None
#     - exists(key: str) -> bool
#
# - InMemoryStore(KeyValueStore)
#     Dict-backed store for tests and throwaway sessions.
#
# - FileStore(KeyValueStore)
#     One file per slot under a storage directory:
#       metadata/
#       └── learnedCategories.json
#     Writes go to a temp file first and are renamed into place so a
#     crash never leaves a half-written slot behind.
#
# ==============================================

import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import structlog

logger = structlog.get_logger(__name__)


class PersistenceError(Exception):
    """A store slot could not be read or written."""


class KeyValueStore(ABC):
    """Named byte slots with overwrite semantics."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        ...

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    def exists(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryStore(KeyValueStore):
    """Process-local store backed by a dict."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._slots: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._slots.get(key)

    def set(self, key: str, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise PersistenceError(f"slot {key!r} expects bytes, got {type(value).__name__}")
        self._slots[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._slots.pop(key, None)


class FileStore(KeyValueStore):
    """
    Stores each slot as a file inside a directory.

    Files created:
    - <storage_dir>/<key>.json
    """

    _SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")

    def __init__(self, storage_dir: str = "metadata/"):
        """
        Initialize the file store.

        Args:
            storage_dir: Directory to keep slot files in (created if missing)
        """
        self.storage_dir = Path(storage_dir)

        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"cannot create storage dir {self.storage_dir}: {exc}") from exc

    def path_for(self, key: str) -> Path:
        if not self._SAFE_KEY.match(key) or key in (".", ".."):
            raise PersistenceError(f"invalid slot key {key!r}")
        return self.storage_dir / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        if not path.exists():
            logger.debug("slot_absent", path=str(path))
            return None
        try:
            return path.read_bytes()
        except OSError as exc:
            raise PersistenceError(f"cannot read {path}: {exc}") from exc

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        if not isinstance(value, (bytes, bytearray)):
            raise PersistenceError(f"slot {key!r} expects bytes, got {type(value).__name__}")

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.storage_dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise PersistenceError(f"cannot write {path}: {exc}") from exc
        finally:
            # Left over only when the write or rename did not complete
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("slot_written", path=str(path), size=len(value))

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise PersistenceError(f"cannot delete {path}: {exc}") from exc
        logger.info("slot_deleted", path=str(path))
