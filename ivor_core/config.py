"""Runtime settings loaded from the environment (optionally a .env file)."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ivor_core.models.conversation import OrchestratorConfig
from ivor_core.models.trust import TrustConfig


class Settings(BaseModel):
    """Configuration for a running IVOR core instance."""

    cache_ttl_seconds: int = 24 * 60 * 60
    cache_max_entries: int = Field(ge=1, default=1000)
    probe_timeout_seconds: float = 5.0
    max_concurrent_probes: int = Field(ge=1, default=5)
    turn_deadline_seconds: float = 8.0
    max_resources: int = Field(ge=1, default=5)
    max_knowledge: int = Field(ge=1, default=3)
    log_level: str = "INFO"

    def trust_config(self) -> TrustConfig:
        return TrustConfig(
            cache_ttl_seconds=self.cache_ttl_seconds,
            cache_max_entries=self.cache_max_entries,
            probe_timeout_seconds=self.probe_timeout_seconds,
            max_concurrent_probes=self.max_concurrent_probes,
            turn_deadline_seconds=self.turn_deadline_seconds,
        )

    def orchestrator_config(self) -> OrchestratorConfig:
        return OrchestratorConfig(
            max_resources=self.max_resources,
            max_knowledge=self.max_knowledge,
        )


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from IVOR_* environment variables.

    A .env file (or `env_file`) is read first; variables already set in the
    process environment win. Invalid numeric values raise pydantic's
    ValidationError at startup rather than being silently defaulted.
    """
    load_dotenv(env_file, override=False)

    defaults = Settings()
    return Settings(
        cache_ttl_seconds=os.getenv("IVOR_CACHE_TTL_SECONDS", defaults.cache_ttl_seconds),
        cache_max_entries=os.getenv("IVOR_CACHE_MAX_ENTRIES", defaults.cache_max_entries),
        probe_timeout_seconds=os.getenv("IVOR_PROBE_TIMEOUT_SECONDS", defaults.probe_timeout_seconds),
        max_concurrent_probes=os.getenv("IVOR_MAX_CONCURRENT_PROBES", defaults.max_concurrent_probes),
        turn_deadline_seconds=os.getenv("IVOR_TURN_DEADLINE_SECONDS", defaults.turn_deadline_seconds),
        max_resources=os.getenv("IVOR_MAX_RESOURCES", defaults.max_resources),
        max_knowledge=os.getenv("IVOR_MAX_KNOWLEDGE", defaults.max_knowledge),
        log_level=os.getenv("IVOR_LOG_LEVEL", defaults.log_level).upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
