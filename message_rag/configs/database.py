"""
Database configuration settings.

PostgreSQL (with the pgvector extension) connection and pool parameters for
the async engine.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Vector store connection configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL

from message_rag.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection settings (POSTGRES_* variables)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the individual fields when set",
    )
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: SecretStr = SecretStr("postgres")
    db: str = Field(default="message_rag", description="Database with the vector extension")

    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = False

    ssl: bool = Field(default=False, description="Require TLS (managed Postgres)")

    @property
    def async_database_url(self) -> str:
        """asyncpg URL for create_async_engine."""
        if self.url:
            return self.url

        return URL.create(
            "postgresql+asyncpg",
            username=self.user,
            password=self.password.get_secret_value(),
            host=self.host,
            port=self.port,
            database=self.db,
            query={"ssl": "require"} if self.ssl else {},
        ).render_as_string(hide_password=False)
