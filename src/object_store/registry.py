"""
Tree registry: the id -> entry and id -> parent maps of a store.

`register` and `unregister` are the only functions that change the shape of
the tree. Everything the store does structurally is built out of them.
"""

import logging
from datetime import datetime
from typing import Dict, Iterator, List, Optional

from object_store.entries import Entry, attach_child, children_of, detach_child

logger = logging.getLogger(__name__)


class TreeRegistry:
    """Authoritative maps of a single store. Internal; not part of the public API."""

    def __init__(self):
        self._entries: Dict[str, Entry] = {}
        self._parents: Dict[str, Optional[Entry]] = {}

    def __contains__(self, entry_id: str) -> bool:
        return entry_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, entry_id: str) -> Optional[Entry]:
        return self._entries.get(entry_id)

    def parent_of(self, entry_id: str) -> Optional[Entry]:
        """Parent folder of `entry_id`, or `None` for the root (and for unknown ids)."""
        return self._parents.get(entry_id)

    def register(self, entry: Entry, parent: Optional[Entry], now: datetime) -> None:
        """
        Insert `entry` under `parent` (`None` only for the root).

        When a parent is given the entry is appended to its children and both
        `modified_at` values become `now`.
        """
        if entry.id in self._entries:
            raise ValueError(f"Entry id {entry.id} is already registered")
        if parent is not None and not parent.is_folder:
            raise ValueError(f"Parent {parent.id} is not a folder")
        self._entries[entry.id] = entry
        self._parents[entry.id] = parent
        if parent is not None:
            attach_child(parent, entry, now)
        logger.debug(f"Registered {entry.kind.value} {entry.id} under {parent.id if parent else None}")

    def unregister(self, entry: Entry, now: datetime) -> None:
        """
        Remove `entry` from both maps and from its parent's children.

        The parent's `modified_at` (and the detached entry's) becomes `now`.
        """
        parent = self._parents.pop(entry.id, None)
        del self._entries[entry.id]
        if parent is not None:
            detach_child(parent, entry, now)
        logger.debug(f"Unregistered {entry.kind.value} {entry.id}")

    def ancestors(self, entry_id: str) -> Iterator[Entry]:
        """Parent, grandparent, ... up to and including the root."""
        parent = self._parents.get(entry_id)
        while parent is not None:
            yield parent
            parent = self._parents.get(parent.id)

    def is_ancestor(self, candidate_id: str, entry_id: str) -> bool:
        return any(ancestor.id == candidate_id for ancestor in self.ancestors(entry_id))

    def descendants_post_order(self, folder: Entry) -> List[Entry]:
        """Every descendant of `folder`, children before their parents, siblings in order."""
        ordered: List[Entry] = []
        stack = [(child, False) for child in reversed(children_of(folder))]
        while stack:
            entry, expanded = stack.pop()
            if expanded or not entry.is_folder:
                ordered.append(entry)
                continue
            stack.append((entry, True))
            stack.extend((child, False) for child in reversed(children_of(entry)))
        return ordered
