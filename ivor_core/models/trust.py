"""Trust scoring configuration and outputs."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class TrustLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    VERY_LOW = "very_low"


class TrustInterpretation(BaseModel):
    level: TrustLevel
    description: str
    color: str


class TrustCacheEntry(BaseModel):
    """Last reachability verdict for one URL."""

    url: str
    is_valid: bool
    checked_at: datetime


class SourceVerification(BaseModel):
    verified: int = 0
    unverified: int = 0
    total: int = 0


class TrustConfig(BaseModel):
    """Configuration for the Trust Score Engine."""

    cache_ttl_seconds: int = 24 * 60 * 60
    cache_max_entries: int = Field(ge=1, default=1000)
    probe_timeout_seconds: float = 5.0
    max_concurrent_probes: int = Field(ge=1, default=5)
    turn_deadline_seconds: float = 8.0
    freshness_days: int = 180               # Full recency credit inside this window
    staleness_horizon_days: int = 730       # Zero recency credit from here on
    user_agent: str = "IVOR-Health-Bot/1.0"
