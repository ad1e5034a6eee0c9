"""
Static documents — files loaded into the store at startup under fixed keys
(e.g. "about"). They are written without expiry and always read with
skip_expire, so they stay put for the life of the store.
"""

import logging
from pathlib import Path

from ..core.storage import DocumentStore

logger = logging.getLogger(__name__)


async def load_static_documents(store: DocumentStore, documents: dict[str, str]) -> list[str]:
    """Load each key → path into the store. Returns the keys that were loaded."""
    loaded = []
    for key, path in documents.items():
        file_path = Path(path)
        try:
            data = file_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Static document %s unreadable (%s): %s", key, path, e)
            continue

        if not await store.set(key, data, skip_expire=True):
            logger.warning("Failed to load static document: %s", key)
            continue

        logger.info("Loaded static document: %s (%s)", key, path)
        loaded.append(key)
    return loaded
