"""
Document store abstraction. Redis OR process memory. Controlled by FF_USE_REDIS flag.

Values are text. Binary payloads are base64-encoded before they get here.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

from redis.exceptions import RedisError

from .config import get_settings
from .flags import get_flags

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    def __init__(self, expire: Optional[int] = None):
        self.expire = expire

    @abstractmethod
    async def get(self, key: str, skip_expire: bool = False) -> Optional[str]:
        """Fetch a value. None when absent. skip_expire=True never refreshes the TTL."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str, skip_expire: bool = False) -> bool:
        """Store a value. Returns False when the write failed."""
        ...

    async def close(self) -> None:
        return None


class RedisDocumentStore(DocumentStore):
    def __init__(self, client=None, expire: Optional[int] = None):
        super().__init__(expire)
        self._client = client

    def _get_client(self):
        if self._client is None:
            from .redis import get_redis

            self._client = get_redis()
        return self._client

    async def get(self, key: str, skip_expire: bool = False) -> Optional[str]:
        client = self._get_client()
        try:
            value = await client.get(key)
        except RedisError as e:
            logger.error("Redis get failed (key=%s): %s", key, e)
            return None

        if value is not None and self.expire and not skip_expire:
            try:
                await client.expire(key, self.expire)
            except RedisError as e:
                logger.warning("Redis expire refresh failed (key=%s): %s", key, e)
        return value

    async def set(self, key: str, value: str, skip_expire: bool = False) -> bool:
        client = self._get_client()
        ex = self.expire if self.expire and not skip_expire else None
        try:
            await client.set(key, value, ex=ex)
        except RedisError as e:
            logger.error("Redis set failed (key=%s): %s", key, e)
            return False
        return True

    async def close(self) -> None:
        from .redis import close_redis

        await close_redis()
        self._client = None


class MemoryDocumentStore(DocumentStore):
    """Keeps documents in a dict. Same expiry rules as Redis, on a monotonic clock."""

    def __init__(self, expire: Optional[int] = None, clock=time.monotonic):
        super().__init__(expire)
        self._clock = clock
        self._data: dict[str, tuple[str, Optional[float]]] = {}

    async def get(self, key: str, skip_expire: bool = False) -> Optional[str]:
        entry = self._data.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        now = self._clock()
        if expires_at is not None and expires_at <= now:
            del self._data[key]
            return None

        if expires_at is not None and not skip_expire:
            self._data[key] = (value, now + self.expire)
        return value

    async def set(self, key: str, value: str, skip_expire: bool = False) -> bool:
        expires_at = None
        if self.expire and not skip_expire:
            expires_at = self._clock() + self.expire
        self._data[key] = (value, expires_at)
        return True

    def __len__(self) -> int:
        return len(self._data)


_store: Optional[DocumentStore] = None


def get_store() -> DocumentStore:
    """Return the active document store based on feature flags."""
    global _store
    if _store is None:
        settings = get_settings()
        if get_flags().use_redis:
            _store = RedisDocumentStore(expire=settings.document_expire)
        else:
            _store = MemoryDocumentStore(expire=settings.document_expire)
        logger.info("Document store: %s (expire=%s)", type(_store).__name__, settings.document_expire)
    return _store


async def close_store() -> None:
    global _store
    if _store:
        await _store.close()
        _store = None
