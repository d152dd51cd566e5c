"""
Key-Value Stores - Where the save record lives.

The engine only needs single-key get/set/delete with atomic replace.
Provided backends:
- MemoryStore: dict-backed, for tests and throwaway sessions
- FileStore: one file per key on local disk
- LocalStorageStore: wraps a browser-style localStorage object
"""

from __future__ import annotations
import logging
import string
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Synchronous string store keyed by name."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryStore:
    """In-memory store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class FileStore:
    """
    File-based store, one file per key.

    Usage:
        store = FileStore("~/.newtonquest/saves")
        store.set("NEWTONGAMESTATE", payload)

    Writes go to a temp file beside the target and are moved into place,
    so a reader never sees a half-written value.
    """

    _VALID_KEY_CHARS = set(string.ascii_letters + string.digits + "-_.")

    def __init__(self, directory: str | Path | None = None):
        if directory is None:
            directory = Path.home() / ".newtonquest" / "saves"
        self.directory = Path(directory).expanduser()

        # Ensure store directory exists
        self.directory.mkdir(parents=True, exist_ok=True)

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as handle:
            handle.write(value)
        tmp_path.replace(path)
        logger.debug(f"Wrote {len(value)} bytes to {path}")

    def delete(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)

    def _path_for(self, key: str) -> Path:
        if not key or not set(key) <= self._VALID_KEY_CHARS or key.startswith("."):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.directory / f"{key}.value"


class LocalStorageStore:
    """
    Adapter for a browser localStorage object (getItem/setItem/removeItem).

    Used when the engine runs in a web build; the storage object is
    passed in by the host page.
    """

    def __init__(self, local_storage: Any, prefix: str = ""):
        self._storage = local_storage
        self.prefix = prefix

    def get(self, key: str) -> str | None:
        value = self._storage.getItem(self.prefix + key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        self._storage.setItem(self.prefix + key, value)

    def delete(self, key: str) -> None:
        self._storage.removeItem(self.prefix + key)
