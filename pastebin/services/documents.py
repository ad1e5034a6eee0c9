"""
Document ingestion and retrieval.

Store layout:
  <key>              text document, stored as-is
  file-<key>-type    content type of a file document (written first)
  file-<key>         base64 of the file payload (written second)

The type entry is the existence guard for file documents: if it is missing
or empty, the payload entry is never read. Empty values read as absent, so
a flat body posted to /file (stored with an empty type) is not retrievable.
"""

import base64
import logging
from typing import Optional

from starlette.requests import Request

from ..core.errors import NotFound, PayloadTooLarge, StorageError
from ..core.storage import DocumentStore
from ..models import FileDocument, TextDocument, Upload, file_key, file_type_key
from .key_generators import KeyGenerator
from .keys import DEFAULT_KEY_LENGTH, DEFAULT_MAX_ATTEMPTS, KeyAllocator
from .uploads import accumulate

logger = logging.getLogger(__name__)


def encode_payload(payload: bytes) -> str:
    """Binary payload → text safe for the store."""
    return base64.b64encode(payload).decode("ascii")


def decode_payload(encoded: str) -> bytes:
    return base64.b64decode(encoded)


class DocumentHandler:
    def __init__(
        self,
        store: DocumentStore,
        key_generator: KeyGenerator,
        key_length: int = DEFAULT_KEY_LENGTH,
        max_length: Optional[int] = None,
        max_key_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self.store = store
        self.key_length = key_length
        self.max_length = max_length
        self.allocator = KeyAllocator(store, key_generator, key_length, max_key_attempts)

    # ── Retrieval ────────────────────────────────────────────────────

    async def handle_get(self, key: str, skip_expire: bool = False) -> TextDocument:
        data = await self.store.get(key, skip_expire=skip_expire)
        if not data:
            logger.warning("Document not found: %s", key)
            raise NotFound(key)
        logger.debug("Retrieved document: %s", key)
        return TextDocument(key=key, data=data)

    async def handle_raw_get(self, key: str, skip_expire: bool = False) -> str:
        data = await self.store.get(key, skip_expire=skip_expire)
        if not data:
            logger.warning("Raw document not found: %s", key)
            raise NotFound(key)
        logger.debug("Retrieved raw document: %s", key)
        return data

    async def handle_get_file(self, key: str, skip_expire: bool = False) -> FileDocument:
        content_type = await self.store.get(file_type_key(key), skip_expire=skip_expire)
        if not content_type:
            logger.warning("File meta not found: %s", key)
            raise NotFound(key)

        encoded = await self.store.get(file_key(key), skip_expire=skip_expire)
        if not encoded:
            logger.warning("File not found despite meta: %s", key)
            raise NotFound(key)

        logger.debug("Retrieved file: %s (%s)", key, content_type)
        return FileDocument(
            key=key,
            payload=decode_payload(encoded),
            content_type=content_type,
        )

    # ── Ingestion ────────────────────────────────────────────────────

    async def handle_post(self, request: Request) -> str:
        upload = await accumulate(request)
        return await self.ingest(upload, is_file=False)

    async def handle_post_file(self, request: Request) -> str:
        upload = await accumulate(request)
        return await self.ingest(upload, is_file=True)

    async def ingest(self, upload: Upload, is_file: bool) -> str:
        """
        Store an accumulated upload. Returns the logical key (never prefixed).

        Oversized uploads are rejected before a key is drawn. File uploads
        write their type entry before the payload; a failed type write
        leaves no payload behind.
        """
        if self.max_length and len(upload) > self.max_length:
            logger.warning(
                "Document exceeds max length (%d > %d)", len(upload), self.max_length,
            )
            raise PayloadTooLarge()

        key = await self.allocator.allocate()

        if is_file:
            if not await self.store.set(file_type_key(key), upload.content_type or ""):
                logger.error("Error adding file meta: %s", key)
                raise StorageError(file_type_key(key))
            ok = await self.store.set(file_key(key), encode_payload(upload.payload))
        else:
            ok = await self.store.set(key, upload.payload.decode("utf-8", errors="replace"))

        if not ok:
            logger.error("Error adding document: %s", key)
            raise StorageError(key)

        logger.info(
            "Added %s: %s (%d bytes)", "file" if is_file else "document", key, len(upload),
        )
        return key
