"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        BILLING_DB_HOST: Database host (default: localhost)
        BILLING_DB_PORT: Database port (default: 5432)
        BILLING_DB_DATABASE: Database name (default: billing)
        BILLING_DB_USERNAME: Database user (default: billing)
        BILLING_DB_PASSWORD: Database password (required in production)
        BILLING_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="BILLING_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="billing", description="Database name")
    username: str = Field(default="billing", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class OutboxConsumerSettings(BaseSettings):
    """Billing provisioning consumer settings.

    Environment variables:
        BILLING_OUTBOX_ENABLED: Run the consumer in this process (default: true)
        BILLING_OUTBOX_POLL_INTERVAL_SECONDS: Delay between polls (default: 5)
        BILLING_OUTBOX_BATCH_SIZE: Maximum events per poll (default: 50)
    """

    model_config = SettingsConfigDict(
        env_prefix="BILLING_OUTBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Run the outbox consumer")
    poll_interval_seconds: float = Field(
        default=5.0,
        description="Seconds between the end of one poll and the next",
        gt=0,
    )
    batch_size: int = Field(
        default=50,
        description="Maximum events fetched per poll",
        ge=1,
        le=1000,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(
        default="Billing Provisioner", description="Application name"
    )
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def outbox(self) -> OutboxConsumerSettings:
        """Get outbox consumer settings."""
        return get_outbox_consumer_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_outbox_consumer_settings() -> OutboxConsumerSettings:
    """Get cached outbox consumer settings."""
    return OutboxConsumerSettings()
