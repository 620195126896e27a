"""
In-memory object store that behaves like a cloud-drive backend.

Intended as a test double: files and folders with ids, timestamps and
move/copy/delete semantics, living only as long as the store instance.
"""

from object_store.errors import (
    EntryNotFoundError,
    InvalidMoveError,
    ObjectStoreError,
    WrongKindError,
)
from object_store.schemas import FileRecord, FolderMiniRecord, FolderRecord
from object_store.store import ObjectStore

__all__ = [
    "EntryNotFoundError",
    "FileRecord",
    "FolderMiniRecord",
    "FolderRecord",
    "InvalidMoveError",
    "ObjectStore",
    "ObjectStoreError",
    "WrongKindError",
]
