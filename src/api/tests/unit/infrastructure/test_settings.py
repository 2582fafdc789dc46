"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import (
    DatabaseSettings,
    OutboxConsumerSettings,
    get_outbox_consumer_settings,
)


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_size(self):
        """The pool holds ten connections by default."""
        settings = DatabaseSettings()
        assert settings.pool_max_connections == 10

    def test_pool_max_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=0)

    def test_pool_max_respects_upper_limit(self):
        """Pool max should not exceed reasonable limit."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)

    def test_pool_size_is_the_only_pool_setting(self, monkeypatch):
        """A minimum pool size is not configurable; the pool has no floor."""
        monkeypatch.setenv("BILLING_DB_POOL_MIN_CONNECTIONS", "50")

        settings = DatabaseSettings(pool_max_connections=5)

        assert "pool_min_connections" not in DatabaseSettings.model_fields
        assert settings.pool_max_connections == 5


class TestDatabaseSettingsEnvironment:
    """Tests for environment variable loading."""

    def test_reads_billing_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("BILLING_DB_HOST", "db.internal")
        monkeypatch.setenv("BILLING_DB_PORT", "6543")
        monkeypatch.setenv("BILLING_DB_PASSWORD", "s3cret")

        settings = DatabaseSettings()

        assert settings.host == "db.internal"
        assert settings.port == 6543
        assert settings.password.get_secret_value() == "s3cret"

    def test_connection_string_omits_password(self, mock_db_settings):
        assert mock_db_settings.connection_string == (
            "postgresql://testuser@testhost:5432/testdb"
        )
        assert "testpass" not in mock_db_settings.connection_string


class TestOutboxConsumerSettings:
    """Tests for outbox consumer settings."""

    def test_defaults(self, monkeypatch):
        """Polls every five seconds, fifty events at a time."""
        for name in ("ENABLED", "POLL_INTERVAL_SECONDS", "BATCH_SIZE"):
            monkeypatch.delenv(f"BILLING_OUTBOX_{name}", raising=False)

        settings = OutboxConsumerSettings()

        assert settings.enabled is True
        assert settings.poll_interval_seconds == 5.0
        assert settings.batch_size == 50

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BILLING_OUTBOX_ENABLED", "false")
        monkeypatch.setenv("BILLING_OUTBOX_POLL_INTERVAL_SECONDS", "0.5")
        monkeypatch.setenv("BILLING_OUTBOX_BATCH_SIZE", "10")

        settings = OutboxConsumerSettings()

        assert settings.enabled is False
        assert settings.poll_interval_seconds == 0.5
        assert settings.batch_size == 10

    @pytest.mark.parametrize("interval", [0, -1])
    def test_poll_interval_must_be_positive(self, interval):
        with pytest.raises(ValidationError):
            OutboxConsumerSettings(poll_interval_seconds=interval)

    @pytest.mark.parametrize("batch_size", [0, 1001])
    def test_batch_size_bounds(self, batch_size):
        with pytest.raises(ValidationError):
            OutboxConsumerSettings(batch_size=batch_size)

    def test_getter_is_cached(self):
        get_outbox_consumer_settings.cache_clear()
        try:
            assert get_outbox_consumer_settings() is get_outbox_consumer_settings()
        finally:
            get_outbox_consumer_settings.cache_clear()
