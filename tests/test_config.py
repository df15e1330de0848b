"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from ivor_core.config import Settings, configure_logging, load_settings

ENV_VARS = (
    "IVOR_CACHE_TTL_SECONDS",
    "IVOR_CACHE_MAX_ENTRIES",
    "IVOR_PROBE_TIMEOUT_SECONDS",
    "IVOR_MAX_CONCURRENT_PROBES",
    "IVOR_TURN_DEADLINE_SECONDS",
    "IVOR_MAX_RESOURCES",
    "IVOR_MAX_KNOWLEDGE",
    "IVOR_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv then delenv so monkeypatch removes anything a .env file sets during the test
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    empty_env = tmp_path / "empty.env"
    empty_env.write_text("")
    return empty_env


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings(str(clean_env))
        assert settings == Settings()
        assert settings.cache_ttl_seconds == 86400
        assert settings.probe_timeout_seconds == 5.0

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("IVOR_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("IVOR_MAX_CONCURRENT_PROBES", "2")
        monkeypatch.setenv("IVOR_TURN_DEADLINE_SECONDS", "1.5")
        monkeypatch.setenv("IVOR_LOG_LEVEL", "debug")

        settings = load_settings(str(clean_env))

        assert settings.cache_ttl_seconds == 60
        assert settings.max_concurrent_probes == 2
        assert settings.turn_deadline_seconds == 1.5
        assert settings.log_level == "DEBUG"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "ivor.env"
        env_file.write_text("IVOR_MAX_RESOURCES=8\nIVOR_CACHE_MAX_ENTRIES=50\n")

        settings = load_settings(str(env_file))

        assert settings.max_resources == 8
        assert settings.cache_max_entries == 50

    def test_process_environment_beats_env_file(self, clean_env, tmp_path, monkeypatch):
        env_file = tmp_path / "ivor.env"
        env_file.write_text("IVOR_MAX_KNOWLEDGE=9\n")
        monkeypatch.setenv("IVOR_MAX_KNOWLEDGE", "2")

        assert load_settings(str(env_file)).max_knowledge == 2

    def test_invalid_values_fail_fast(self, clean_env, monkeypatch):
        monkeypatch.setenv("IVOR_MAX_CONCURRENT_PROBES", "zero")
        with pytest.raises(ValidationError):
            load_settings(str(clean_env))

    def test_bounds_enforced(self, clean_env, monkeypatch):
        monkeypatch.setenv("IVOR_CACHE_MAX_ENTRIES", "0")
        with pytest.raises(ValidationError):
            load_settings(str(clean_env))


class TestDerivedConfig:
    def test_trust_config(self):
        config = Settings(cache_ttl_seconds=30, max_concurrent_probes=3).trust_config()
        assert config.cache_ttl_seconds == 30
        assert config.max_concurrent_probes == 3

    def test_orchestrator_config(self):
        config = Settings(max_resources=7, max_knowledge=2).orchestrator_config()
        assert config.max_resources == 7
        assert config.max_knowledge == 2

    def test_configure_logging_tolerates_unknown_level(self):
        # Falls back to INFO instead of raising.
        configure_logging(Settings(log_level="NOT_A_LEVEL"))
