"""
Entry model for the object store.

Files and folders share one `Entry` type; the `kind` tag says which payload
it carries (`FilePayload` with the content, `FolderPayload` with the ordered
children). State changes go through the functions below, each of which
documents exactly which timestamps it moves.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple, Union

from object_store.schemas import (
    FileRecord,
    FolderMiniRecord,
    FolderRecord,
    format_timestamp,
)

Content = Union[str, bytes, bytearray, None]


class EntryKind(str, Enum):
    """The two kinds of entry. Fixed at creation."""
    FILE = "file"
    FOLDER = "folder"


@dataclass
class FilePayload:
    content: Content = None


@dataclass
class FolderPayload:
    children: List["Entry"] = field(default_factory=list)


@dataclass(eq=False)
class Entry:
    """A live file or folder owned by a store. Never handed to callers."""
    id: str
    name: str
    kind: EntryKind
    created_at: datetime
    modified_at: datetime
    payload: Union[FilePayload, FolderPayload]

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER


def new_file(entry_id: str, name: str, now: datetime, content: Content = None) -> Entry:
    """Build an unregistered file with `created_at == modified_at == now`."""
    return Entry(
        id=entry_id,
        name=name,
        kind=EntryKind.FILE,
        created_at=now,
        modified_at=now,
        payload=FilePayload(content=content),
    )


def new_folder(entry_id: str, name: str, now: datetime) -> Entry:
    """Build an empty, unregistered folder with `created_at == modified_at == now`."""
    return Entry(
        id=entry_id,
        name=name,
        kind=EntryKind.FOLDER,
        created_at=now,
        modified_at=now,
        payload=FolderPayload(),
    )


def rename(entry: Entry, name: str, now: datetime) -> Entry:
    """Set the name. Postcondition: `entry.modified_at == now`; nothing else changes."""
    entry.name = name
    entry.modified_at = now
    return entry


def replace_content(entry: Entry, content: Content, now: datetime) -> Entry:
    """
    Replace a file's content.

    Postcondition: `entry.modified_at == now`. The parent folder is not
    touched here; the caller owns the parent and stamps it with the same `now`.
    """
    _file_payload(entry).content = content
    entry.modified_at = now
    return entry


def attach_child(folder: Entry, child: Entry, now: datetime) -> Entry:
    """
    Append `child` to the end of the folder's children.

    Postcondition: `folder.modified_at == child.modified_at == now`.
    """
    _folder_payload(folder).children.append(child)
    folder.modified_at = now
    child.modified_at = now
    return folder


def detach_child(folder: Entry, child: Entry, now: datetime) -> Entry:
    """
    Remove `child` from the folder's children (matched by id).

    Postcondition: `folder.modified_at == child.modified_at == now`.
    """
    payload = _folder_payload(folder)
    payload.children = [c for c in payload.children if c.id != child.id]
    folder.modified_at = now
    child.modified_at = now
    return folder


def children_of(folder: Entry) -> Tuple[Entry, ...]:
    """Snapshot of the children in insertion order."""
    return tuple(_folder_payload(folder).children)


def content_of(entry: Entry) -> Content:
    return _file_payload(entry).content


def content_size(content: Content) -> int:
    """0 when absent, UTF-8 byte length for text (lone surrogates count 3), raw length for binary."""
    if content is None:
        return 0
    if isinstance(content, str):
        return len(content.encode("utf-8", "surrogatepass"))
    return len(content)


def to_mini_record(entry: Entry, parent_id: Optional[str]) -> Union[FileRecord, FolderMiniRecord]:
    common = dict(
        id=entry.id,
        name=entry.name,
        parent_id=parent_id,
        created_at=format_timestamp(entry.created_at),
        modified_at=format_timestamp(entry.modified_at),
    )
    if entry.is_file:
        return FileRecord(size=content_size(content_of(entry)), **common)
    return FolderMiniRecord(**common)


def to_record(entry: Entry, parent_id: Optional[str]) -> Union[FileRecord, FolderRecord]:
    """
    Full record of an entry.

    Folders list their direct children as mini records, so a child folder's
    own children never appear and the output is exactly one level deep.
    """
    if entry.is_file:
        return to_mini_record(entry, parent_id)
    mini = to_mini_record(entry, parent_id)
    return FolderRecord(
        entries=[to_mini_record(child, entry.id) for child in children_of(entry)],
        **mini.model_dump(exclude={"type"}),
    )


def _file_payload(entry: Entry) -> FilePayload:
    if not isinstance(entry.payload, FilePayload):
        raise TypeError(f"Entry {entry.id} is a {entry.kind.value}, not a file")
    return entry.payload


def _folder_payload(entry: Entry) -> FolderPayload:
    if not isinstance(entry.payload, FolderPayload):
        raise TypeError(f"Entry {entry.id} is a {entry.kind.value}, not a folder")
    return entry.payload
