"""
Unified application settings.

Aggregates the per-concern settings into one Settings object.

Dependencies: pydantic, message_rag.configs
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from message_rag.configs.base import BaseSettings
from message_rag.configs.database import DatabaseSettings
from message_rag.configs.embedding import EmbeddingSettings


class Settings(BaseSettings):
    """Application settings; each section reads its own env prefix."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment and .env are read once per process.

    Usage:
        from message_rag.configs import get_settings
        dims = get_settings().embedding.dimensions
    """
    return Settings()
