"""
In-memory object store modelled on cloud drives.

`ObjectStore` is the public surface: create/get/update/copy/delete for files
and folders. Every operation validates all of its inputs before touching any
state, so a rejected call leaves the store exactly as it was. Callers only
ever receive detached records (see `object_store.schemas`).
"""

import logging
from typing import List, Optional, Tuple, Union

from object_store.entries import (
    Content,
    Entry,
    EntryKind,
    children_of,
    content_of,
    new_file,
    new_folder,
    rename,
    replace_content,
    to_record,
)
from object_store.errors import EntryNotFoundError, InvalidMoveError, WrongKindError
from object_store.ids import IdAllocator, MonotonicClock
from object_store.registry import TreeRegistry
from object_store.schemas import FileRecord, FolderRecord
from object_store.utils.decorators import log_operation

logger = logging.getLogger(__name__)

DEFAULT_ROOT_FOLDER_NAME = "root"


class ObjectStore:
    """A single tree of files and folders living for the lifetime of the instance."""

    def __init__(
        self,
        root_folder_id: Optional[str] = None,
        root_folder_name: str = DEFAULT_ROOT_FOLDER_NAME,
        clock: Optional[MonotonicClock] = None,
    ):
        self._ids = IdAllocator()
        self._clock = clock or MonotonicClock()
        self._registry = TreeRegistry()

        if root_folder_id:
            self._ids.reserve(root_folder_id)
            root_id = root_folder_id
        else:
            root_id = self._ids.allocate()

        self._root = new_folder(root_id, root_folder_name, self._clock.now())
        self._registry.register(self._root, None, self._root.created_at)
        logger.info(f"Object store created with root folder {root_id}")

    @property
    def root_id(self) -> str:
        return self._root.id

    def __len__(self) -> int:
        """Number of registered entries, root included."""
        return len(self._registry)

    def __contains__(self, entry_id: str) -> bool:
        return entry_id in self._registry

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    @log_operation(logger_name=__name__)
    def create_file(self, name: str, *, parent_id: Optional[str] = None, content: Content = None) -> FileRecord:
        """Create a file under `parent_id` (the root when omitted)."""
        parent = self._require_parent(parent_id)
        now = self._clock.now()
        file = new_file(self._ids.allocate(), name, now, content=content)
        self._registry.register(file, parent, now)
        return self._record(file)

    @log_operation(logger_name=__name__)
    def get_file(self, file_id: str) -> FileRecord:
        return self._record(self._require(file_id, EntryKind.FILE))

    @log_operation(logger_name=__name__)
    def get_file_content(self, file_id: str) -> Content:
        """Content exactly as stored: `str`, `bytes`, or `None`."""
        return _detached(content_of(self._require(file_id, EntryKind.FILE)))

    @log_operation(logger_name=__name__)
    def update_file(
        self,
        file_id: str,
        *,
        name: Optional[str] = None,
        content: Content = None,
        parent_id: Optional[str] = None,
    ) -> FileRecord:
        """
        Rename, rewrite and/or move a file. Options left as `None` are unchanged.

        A content change also stamps the parent folder's `modified_at`. A move
        detaches the file from its current folder and appends it to the new one.
        """
        file = self._require(file_id, EntryKind.FILE)
        new_parent = self._require(parent_id, EntryKind.FOLDER, role="Parent") if parent_id is not None else None

        now = self._clock.now()
        if name is not None:
            rename(file, name, now)
        if content is not None:
            replace_content(file, content, now)
            self._registry.parent_of(file.id).modified_at = now
        if new_parent is not None:
            self._move(file, new_parent)
        return self._record(file)

    @log_operation(logger_name=__name__)
    def copy_file(self, file_id: str, *, parent_id: Optional[str] = None, name: Optional[str] = None) -> FileRecord:
        """Copy a file into `parent_id` (default: the source's folder) under a new id."""
        source = self._require(file_id, EntryKind.FILE)
        target = self._copy_target(source, parent_id)

        now = self._clock.now()
        copy = new_file(
            self._ids.allocate(),
            source.name if name is None else name,
            now,
            content=_detached(content_of(source)),
        )
        self._registry.register(copy, target, now)
        return self._record(copy)

    @log_operation(logger_name=__name__)
    def delete_file(self, file_id: str) -> None:
        file = self._require(file_id, EntryKind.FILE)
        self._registry.unregister(file, self._clock.now())

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------

    @log_operation(logger_name=__name__)
    def create_folder(self, name: str, *, parent_id: Optional[str] = None) -> FolderRecord:
        """Create an empty folder under `parent_id` (the root when omitted)."""
        parent = self._require_parent(parent_id)
        now = self._clock.now()
        folder = new_folder(self._ids.allocate(), name, now)
        self._registry.register(folder, parent, now)
        return self._record(folder)

    @log_operation(logger_name=__name__)
    def get_folder(self, folder_id: str) -> FolderRecord:
        """Folder record with a one-level listing of its children."""
        return self._record(self._require(folder_id, EntryKind.FOLDER))

    @log_operation(logger_name=__name__)
    def update_folder(self, folder_id: str, *, name: Optional[str] = None, parent_id: Optional[str] = None) -> FolderRecord:
        """
        Rename and/or move a folder.

        The root cannot be moved, and no folder can be moved into itself or
        into one of its own descendants.
        """
        folder = self._require(folder_id, EntryKind.FOLDER)
        new_parent = None
        if parent_id is not None:
            new_parent = self._require(parent_id, EntryKind.FOLDER, role="Parent")
            if folder is self._root:
                raise InvalidMoveError(folder.id, "the root folder cannot be moved")
            if new_parent is folder or self._registry.is_ancestor(folder.id, new_parent.id):
                raise InvalidMoveError(folder.id, f'folder "{new_parent.id}" is inside it')

        now = self._clock.now()
        if name is not None:
            rename(folder, name, now)
        if new_parent is not None:
            self._move(folder, new_parent)
        return self._record(folder)

    @log_operation(logger_name=__name__)
    def copy_folder(self, folder_id: str, *, parent_id: Optional[str] = None, name: Optional[str] = None) -> FolderRecord:
        """
        Deep-copy a folder into `parent_id` (default: the source's folder).

        Every copied entry gets a new id and the copy time as both timestamps.
        Child order is preserved at every depth. The source subtree is
        captured before anything is registered, so copying a folder into
        one of its own descendants terminates.
        """
        source = self._require(folder_id, EntryKind.FOLDER)
        target = self._copy_target(source, parent_id)

        plan = _pre_order(source)
        now = self._clock.now()
        copies = {}
        for original, original_parent_id in plan:
            new_name = name if original is source and name is not None else original.name
            if original.is_folder:
                copy = new_folder(self._ids.allocate(), new_name, now)
            else:
                copy = new_file(self._ids.allocate(), new_name, now, content=_detached(content_of(original)))
            parent = target if original is source else copies[original_parent_id]
            self._registry.register(copy, parent, now)
            copies[original.id] = copy

        logger.debug(f"Copied {len(plan)} entries from folder {source.id} into {target.id}")
        return self._record(copies[source.id])

    @log_operation(logger_name=__name__)
    def delete_folder(self, folder_id: str) -> None:
        """Delete a folder and everything under it, deepest entries first."""
        folder = self._require(folder_id, EntryKind.FOLDER)
        if folder is self._root:
            raise InvalidMoveError(folder.id, "the root folder cannot be deleted")

        now = self._clock.now()
        descendants = self._registry.descendants_post_order(folder)
        for entry in descendants:
            self._registry.unregister(entry, now)
        self._registry.unregister(folder, now)
        logger.debug(f"Deleted folder {folder.id} with {len(descendants)} descendants")

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    @log_operation(logger_name=__name__)
    def get_parent(self, entry_id: str) -> Optional[FolderRecord]:
        """Record of the folder containing `entry_id`; `None` for the root."""
        if entry_id not in self._registry:
            raise EntryNotFoundError(entry_id)
        parent = self._registry.parent_of(entry_id)
        return self._record(parent) if parent is not None else None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, entry_id: str, kind: EntryKind, role: Optional[str] = None) -> Entry:
        entry = self._registry.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id, role or kind.value.capitalize())
        if entry.kind is not kind:
            raise WrongKindError(entry_id, expected=kind.value, actual=entry.kind.value, role=role)
        return entry

    def _require_parent(self, parent_id: Optional[str]) -> Entry:
        if parent_id is None:
            return self._root
        return self._require(parent_id, EntryKind.FOLDER, role="Parent")

    def _copy_target(self, source: Entry, parent_id: Optional[str]) -> Entry:
        if parent_id is None:
            parent = self._registry.parent_of(source.id)
            if parent is None:
                raise InvalidMoveError(source.id, "the root folder has no parent to copy into")
            return parent
        return self._require(parent_id, EntryKind.FOLDER, role="Parent")

    def _move(self, entry: Entry, new_parent: Entry) -> None:
        now = self._clock.now()
        self._registry.unregister(entry, now)
        self._registry.register(entry, new_parent, now)

    def _record(self, entry: Entry) -> Union[FileRecord, FolderRecord]:
        parent = self._registry.parent_of(entry.id)
        return to_record(entry, parent.id if parent is not None else None)


def _pre_order(folder: Entry) -> List[Tuple[Entry, Optional[str]]]:
    """`(entry, parent id)` pairs for `folder` and its subtree, parents first, siblings in order."""
    plan: List[Tuple[Entry, Optional[str]]] = []
    stack: List[Tuple[Entry, Optional[str]]] = [(folder, None)]
    while stack:
        entry, parent_id = stack.pop()
        plan.append((entry, parent_id))
        if entry.is_folder:
            stack.extend((child, entry.id) for child in reversed(children_of(entry)))
    return plan


def _detached(content: Content) -> Content:
    if isinstance(content, bytearray):
        return bytearray(content)
    return content
