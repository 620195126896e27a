"""Exceptions raised by the object store."""

from typing import Optional


class ObjectStoreError(Exception):
    """Base class for every failure raised by an `ObjectStore`."""


class EntryNotFoundError(ObjectStoreError, LookupError):
    """The requested id, or a referenced parent id, is not registered."""

    def __init__(self, entry_id: str, role: str = "Entry"):
        self.entry_id = entry_id
        self.role = role
        super().__init__(f'{role} "{entry_id}" not found.')


class WrongKindError(ObjectStoreError, TypeError):
    """The id exists but resolves to the other kind of entry."""

    def __init__(self, entry_id: str, expected: str, actual: str, role: Optional[str] = None):
        self.entry_id = entry_id
        self.expected = expected
        self.actual = actual
        self.role = role
        if role:
            message = f'{role} "{entry_id}" is not a {expected}.'
        else:
            message = f'"{entry_id}" is a {actual}, not a {expected}.'
        super().__init__(message)


class InvalidMoveError(ObjectStoreError, ValueError):
    """A structural change would break the tree (cycle, or moving/deleting the root)."""

    def __init__(self, entry_id: str, reason: str):
        self.entry_id = entry_id
        self.reason = reason
        super().__init__(f'Cannot move or delete "{entry_id}": {reason}.')
