"""
FastAPI dependencies. Injected into route handlers.
"""

from fastapi import Depends

from ..services.documents import DocumentHandler
from ..services.key_generators import KeyGenerator, build_key_generator
from .config import Settings, get_settings
from .storage import DocumentStore, get_store as _get_store


def get_settings_dep() -> Settings:
    return get_settings()


def get_store_dep() -> DocumentStore:
    """Returns the active document store (Redis or memory)."""
    return _get_store()


def get_key_generator_dep(settings: Settings = Depends(get_settings_dep)) -> KeyGenerator:
    return build_key_generator(settings.key_generator, settings.keyspace)


def get_document_handler(
    settings: Settings = Depends(get_settings_dep),
    store: DocumentStore = Depends(get_store_dep),
    key_generator: KeyGenerator = Depends(get_key_generator_dep),
) -> DocumentHandler:
    return DocumentHandler(
        store=store,
        key_generator=key_generator,
        key_length=settings.key_length,
        max_length=settings.max_length,
        max_key_attempts=settings.max_key_attempts,
    )


def is_static_key(key: str, settings: Settings = Depends(get_settings_dep)) -> bool:
    """Static documents are always read without refreshing their expiry."""
    return key in settings.static_documents
