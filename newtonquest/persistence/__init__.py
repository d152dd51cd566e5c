"""
Persistence - Single-slot save/restore of PlayerState.

There is exactly one save record, stored under a fixed key in a
key-value store. It is overwritten after every transition.
"""

from .store import KeyValueStore, MemoryStore, FileStore, LocalStorageStore
from .save import (
    SAVE_KEY,
    SaveRecord,
    CorruptSave,
    serialize,
    deserialize,
    reset,
    restore,
    save,
)

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "FileStore",
    "LocalStorageStore",
    "SAVE_KEY",
    "SaveRecord",
    "CorruptSave",
    "serialize",
    "deserialize",
    "reset",
    "restore",
    "save",
]
