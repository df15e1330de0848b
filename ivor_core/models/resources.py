"""Support resources and knowledge entries held by the regional registry."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ivor_core.models.journey import JourneyStage
from ivor_core.models.location import UKLocation


class CostTier(str, Enum):
    FREE = "free"
    NHS_FUNDED = "nhs_funded"
    SLIDING_SCALE = "sliding_scale"
    PAID = "paid"


FREE_COST_TIERS = (CostTier.FREE, CostTier.NHS_FUNDED)


class VerificationStatus(str, Enum):
    VERIFIED = "verified"
    PENDING = "pending"
    OUTDATED = "outdated"


class CulturalCompetency(BaseModel):
    model_config = ConfigDict(frozen=True)

    lgbtq_specific: bool = False
    black_specific: bool = False
    trans_specific: bool = False
    disability_aware: bool = False

    @property
    def culturally_specific(self) -> bool:
        """Explicitly serves Black and/or LGBTQ+ people."""
        return self.black_specific or self.lgbtq_specific

    @property
    def match_count(self) -> int:
        return sum((
            self.lgbtq_specific,
            self.black_specific,
            self.trans_specific,
            self.disability_aware,
        ))


class Resource(BaseModel):
    """A service a user can contact. Immutable once loaded into the registry."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    category: str
    journey_stages: Tuple[JourneyStage, ...] = Field(min_length=1)
    locations: Tuple[UKLocation, ...] = Field(min_length=1)
    phone: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    specializations: Tuple[str, ...] = ()
    access_requirements: Tuple[str, ...] = ("none",)
    cost: CostTier = CostTier.FREE
    cultural_competency: CulturalCompetency = CulturalCompetency()
    emergency: bool = False
    availability: str = "weekdays"
    languages: Tuple[str, ...] = ("English",)

    @property
    def culturally_specific(self) -> bool:
        return self.cultural_competency.culturally_specific

    @property
    def has_contact_channel(self) -> bool:
        return bool((self.phone or "").strip() or (self.website or "").strip())


class KnowledgeEntry(BaseModel):
    """A piece of curated guidance with its provenance."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str
    category: str
    journey_stages: Tuple[JourneyStage, ...] = Field(min_length=1)
    locations: Tuple[UKLocation, ...] = Field(min_length=1)
    tags: Tuple[str, ...] = ()
    sources: Tuple[str, ...] = ()          # URLs, bare domains, or organisation names
    last_updated: datetime
    verification_status: VerificationStatus = VerificationStatus.PENDING
    community_validated: bool = False

    @field_validator("last_updated")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are UTC; mixed naive/aware values cannot be ordered.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
