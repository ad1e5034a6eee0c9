"""
Key generators. Each produces a random string of a given length,
usable directly as a store key.
"""

import secrets
from typing import Protocol

DEFAULT_KEYSPACE = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"


class KeyGenerator(Protocol):
    def create_key(self, length: int) -> str: ...


class RandomKeyGenerator:
    """Uniform draw from a fixed alphabet."""

    def __init__(self, keyspace: str = ""):
        self.keyspace = keyspace or DEFAULT_KEYSPACE

    def create_key(self, length: int) -> str:
        return "".join(secrets.choice(self.keyspace) for _ in range(length))


class PhoneticKeyGenerator:
    """Alternating consonants and vowels, e.g. "hopakuzefi"."""

    def create_key(self, length: int) -> str:
        start_with_vowel = secrets.randbelow(2) == 1
        chars = []
        for i in range(length):
            pool = VOWELS if (i % 2 == 0) == start_with_vowel else CONSONANTS
            chars.append(secrets.choice(pool))
        return "".join(chars)


def build_key_generator(kind: str, keyspace: str = "") -> KeyGenerator:
    if kind == "phonetic":
        return PhoneticKeyGenerator()
    if kind == "random":
        return RandomKeyGenerator(keyspace)
    raise ValueError(f"Unknown key generator: {kind!r}")
