"""
Embedding configuration settings.

Manages the hosted embedding model used for message ingestion and
similarity search. The dimension must match the vector column width.

Dependencies: pydantic, pydantic_settings
System role: Embedding model configuration for RAG ingestion and retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EMBEDDING_DIMENSIONS = 1536


class EmbeddingSettings(BaseSettings):
    """Hosted embedding model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    provider_api_key: str | None = Field(
        default=None,
        description="API key for the embedding provider (falls back to OPENAI_API_KEY)",
    )
    model: str = Field(
        default="text-embedding-ada-002",
        description="Embedding model identifier",
    )
    dimensions: int = Field(
        default=EMBEDDING_DIMENSIONS,
        description="Embedding vector dimension (must match the vector(1536) column)",
        ge=1,
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="Deadline for a single batched embedding request",
        gt=0,
    )
    batch_size: int = Field(
        default=1000,
        description="Maximum texts per provider request inside one batched call",
        ge=1,
    )
    top_k: int = Field(
        default=5,
        description="Default number of nearest fragments returned by search",
        ge=1,
        le=100,
    )
