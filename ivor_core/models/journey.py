"""Journey Context — where a user is in their support trajectory, rebuilt every turn."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ivor_core.models.location import UKLocation


class JourneyStage(str, Enum):
    CRISIS = "crisis"
    STABILIZATION = "stabilization"
    GROWTH = "growth"
    COMMUNITY_HEALING = "community_healing"
    ADVOCACY = "advocacy"


# Total order used only for "next stage" suggestions. Progression is not enforced.
STAGE_ORDER: List[JourneyStage] = [
    JourneyStage.CRISIS,
    JourneyStage.STABILIZATION,
    JourneyStage.GROWTH,
    JourneyStage.COMMUNITY_HEALING,
    JourneyStage.ADVOCACY,
]


def next_stage(stage: JourneyStage) -> Optional[JourneyStage]:
    """The stage after `stage` in the journey order, or None for the last one."""
    index = STAGE_ORDER.index(stage)
    if index + 1 < len(STAGE_ORDER):
        return STAGE_ORDER[index + 1]
    return None


class UrgencyLevel(str, Enum):
    EMERGENCY = "emergency"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EmotionalState(str, Enum):
    STRESSED = "stressed"
    OVERWHELMED = "overwhelmed"
    JOYFUL = "joyful"
    EXCITED = "excited"
    UNCERTAIN = "uncertain"
    CALM = "calm"


class Formality(str, Enum):
    FORMAL = "formal"
    CASUAL = "casual"
    MIXED = "mixed"


class CommunityConnectionLevel(str, Enum):
    ISOLATED = "isolated"
    EXPLORING = "exploring"
    CONNECTED = "connected"
    NETWORKED = "networked"
    ORGANIZING = "organizing"


class AccessPreference(str, Enum):
    PHONE = "phone"
    ONLINE = "online"
    IN_PERSON = "in_person"
    FLEXIBLE = "flexible"


class MemoryRecord(BaseModel):
    """A prior-conversation signal handed in by the caller-owned memory store."""

    memory_type: str                        # e.g., "communication_style", "support_need"
    key: str
    value: str
    importance: float = Field(ge=0, le=1, default=0.5)


class JourneyContext(BaseModel):
    """Transient per-turn view of the user. Never persisted by the core."""

    stage: JourneyStage
    emotional_state: EmotionalState = EmotionalState.CALM
    urgency_level: UrgencyLevel = UrgencyLevel.LOW
    formality: Formality = Formality.MIXED
    location: UKLocation = UKLocation.UNKNOWN
    community_connection: CommunityConnectionLevel = CommunityConnectionLevel.EXPLORING
    first_time: bool = True
    returning_user: bool = False
    previous_stages: List[JourneyStage] = []
    resource_access_preference: AccessPreference = AccessPreference.FLEXIBLE
