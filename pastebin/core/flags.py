"""
Central feature flags. One file controls every external dependency.

Set via environment variables (prefix FF_) or .env file.
When a flag is OFF, the system uses a local fallback. Nothing crashes.
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureFlags(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Storage ──────────────────────────────────────────────────────
    use_redis: bool = Field(default=True, alias="FF_USE_REDIS")
    # ON  → Documents kept in Redis. Needs REDIS_URL.
    # OFF → Documents kept in process memory. Lost on restart.

    # ── Static documents ─────────────────────────────────────────────
    serve_static_documents: bool = Field(default=True, alias="FF_SERVE_STATIC_DOCUMENTS")
    # ON  → STATIC_DOCUMENTS loaded into the store at startup, never expire.
    # OFF → Startup skips them. Their keys behave like any other key.


@lru_cache
def get_flags() -> FeatureFlags:
    return FeatureFlags()
