"""
Helpers for filling a store from local files and for printing its contents.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from object_store.schemas import ChildRecord, FolderRecord
from object_store.store import ObjectStore

logger = logging.getLogger(__name__)


def load_directory(
    store: ObjectStore,
    path: Union[str, Path],
    *,
    parent_id: Optional[str] = None,
    max_file_bytes: Optional[int] = None,
) -> int:
    """
    Mirror a local directory into `store` under `parent_id` (the root by default).

    Directories become folders and regular files become files. File content is
    stored as text when it decodes as UTF-8 and as bytes otherwise. Entries are
    created in sorted name order so the resulting child order is stable.

    Args:
        store: Store to fill
        path: Local directory whose contents are copied
        parent_id: Folder receiving the contents
        max_file_bytes: Skip files larger than this many bytes

    Returns:
        Number of entries created
    """
    root = Path(path)
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    target_id = parent_id or store.root_id
    created = 0
    pending: List[Tuple[Path, str]] = [(root, target_id)]
    while pending:
        directory, folder_id = pending.pop()
        for child in sorted(directory.iterdir(), key=lambda p: p.name):
            if child.is_symlink():
                logger.debug(f"Skipping symlink {child}")
                continue
            if child.is_dir():
                record = store.create_folder(child.name, parent_id=folder_id)
                pending.append((child, record.id))
                created += 1
            elif child.is_file():
                if max_file_bytes is not None and child.stat().st_size > max_file_bytes:
                    logger.info(f"Skipping {child}: larger than {max_file_bytes} bytes")
                    continue
                store.create_file(child.name, parent_id=folder_id, content=_read_content(child))
                created += 1

    logger.info(f"Loaded {created} entries from {root}")
    return created


def _read_content(path: Path) -> Union[str, bytes]:
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw


def render_tree(store: ObjectStore, folder_id: Optional[str] = None) -> str:
    """Text tree of a folder (the root by default), children in stored order."""
    folder = store.get_folder(folder_id or store.root_id)
    lines = [f"{folder.name}/"]
    pending = _child_frames(folder, prefix="")
    while pending:
        entry, prefix, is_last = pending.pop()
        connector = "└── " if is_last else "├── "
        if entry.type == "folder":
            lines.append(f"{prefix}{connector}{entry.name}/")
            child_prefix = prefix + ("    " if is_last else "│   ")
            pending.extend(_child_frames(store.get_folder(entry.id), prefix=child_prefix))
        else:
            lines.append(f"{prefix}{connector}{entry.name} ({entry.size} B)")
    return "\n".join(lines)


def _child_frames(folder: FolderRecord, prefix: str) -> List[Tuple[ChildRecord, str, bool]]:
    # Reversed so popping from the end yields children in stored order.
    last = len(folder.entries) - 1
    return [(entry, prefix, i == last) for i, entry in reversed(list(enumerate(folder.entries)))]
