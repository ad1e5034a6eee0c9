"""
Key allocation. Draws candidate keys until one is free in the store.

The check is racy across requests: two allocations may see the same
candidate free and both write it. Last writer wins.
"""

import logging

from ..core.errors import KeySpaceExhausted
from ..core.storage import DocumentStore
from .key_generators import KeyGenerator

logger = logging.getLogger(__name__)

DEFAULT_KEY_LENGTH = 10
DEFAULT_MAX_ATTEMPTS = 100


class KeyAllocator:
    def __init__(
        self,
        store: DocumentStore,
        key_generator: KeyGenerator,
        key_length: int = DEFAULT_KEY_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self.store = store
        self.key_generator = key_generator
        self.key_length = key_length
        self.max_attempts = max_attempts

    async def allocate(self) -> str:
        """Return the first candidate the store reports absent or empty.

        Lookups use skip_expire so collision checks never keep a taken key alive.
        Raises KeySpaceExhausted after max_attempts collisions in a row.
        """
        for attempt in range(1, self.max_attempts + 1):
            key = self.key_generator.create_key(self.key_length)
            if not await self.store.get(key, skip_expire=True):
                return key
            logger.debug("Key collision (attempt %d): %s", attempt, key)

        logger.error(
            "No free key after %d attempts (key_length=%d)",
            self.max_attempts, self.key_length,
        )
        raise KeySpaceExhausted(f"no free key after {self.max_attempts} attempts")
