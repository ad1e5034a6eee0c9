"""
Central configuration. Key allocation, size limits and store settings in one place.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Environment ---
    env: str = Field(default="development", alias="ENV")
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    # --- Keys ---
    key_length: int = Field(default=10, alias="KEY_LENGTH")
    max_key_attempts: int = Field(default=100, alias="MAX_KEY_ATTEMPTS")
    key_generator: str = Field(default="random", alias="KEY_GENERATOR")
    # "random"   → uniform draw from the keyspace below.
    # "phonetic" → alternating consonants/vowels, easy to read aloud.
    keyspace: str = Field(default="", alias="KEYSPACE")

    # --- Documents ---
    max_length: Optional[int] = Field(default=None, alias="MAX_LENGTH")
    static_documents: dict[str, str] = Field(default_factory=dict, alias="STATIC_DOCUMENTS")
    # JSON object of key → file path, e.g. {"about": "about.md"}

    # --- Redis ---
    redis_url: str = Field(default="redis://localhost:6379/0", alias="REDIS_URL")
    document_expire: Optional[int] = Field(default=None, alias="DOCUMENT_EXPIRE")
    # Seconds. Unset → documents never expire.

    # --- API ---
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=7777, alias="API_PORT")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")


@lru_cache
def get_settings() -> Settings:
    return Settings()
