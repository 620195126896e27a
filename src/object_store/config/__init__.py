"""
Configuration management for the object store.

Contains the Pydantic settings and the factory that builds a store from them.
"""

import logging
from typing import TYPE_CHECKING, Optional

from object_store.config.settings import Settings, get_settings

if TYPE_CHECKING:
    from object_store.store import ObjectStore

logger = logging.getLogger(__name__)


def create_store(settings: Optional[Settings] = None) -> "ObjectStore":
    """Build an `ObjectStore` from settings, seeding it when `seed_dir` is set."""
    from object_store.loader import load_directory
    from object_store.store import ObjectStore

    settings = settings or get_settings()
    store = ObjectStore(
        root_folder_id=settings.root_folder_id,
        root_folder_name=settings.root_folder_name,
    )
    if settings.seed_dir:
        created = load_directory(store, settings.seed_dir, max_file_bytes=settings.max_seed_file_bytes)
        logger.info(f"Seeded store from {settings.seed_dir} with {created} entries")
    return store


__all__ = ["Settings", "create_store", "get_settings"]
