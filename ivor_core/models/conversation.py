"""Per-turn request, reply hand-off and response bundle."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ivor_core.models.journey import (
    EmotionalState,
    Formality,
    JourneyContext,
    JourneyStage,
    MemoryRecord,
)
from ivor_core.models.location import UKLocation
from ivor_core.models.resources import KnowledgeEntry, Resource
from ivor_core.models.trust import SourceVerification, TrustLevel


class TurnRequest(BaseModel):
    """One user message plus the caller-owned context for it."""

    text: str
    user_id: Optional[str] = None
    session_id: Optional[str] = None
    location: UKLocation = UKLocation.UNKNOWN
    previous_stages: List[JourneyStage] = []
    memories: List[MemoryRecord] = []


class ReplyRequest(BaseModel):
    """What the reply-generation collaborator receives to write the message text."""

    text: str
    stage: JourneyStage
    emotional_state: EmotionalState
    formality: Formality
    resources: List[Resource]
    knowledge: List[KnowledgeEntry]
    next_stage_pathway: Optional[str] = None
    topic: Optional[str] = None


class JourneyResponse(BaseModel):
    """The structured bundle handed back to the caller for one turn."""

    message: str
    journey_stage: JourneyStage
    journey_context: JourneyContext
    next_stage_pathway: Optional[str] = None
    resources: List[Resource] = []
    knowledge: List[KnowledgeEntry] = []
    follow_up_required: bool = False
    culturally_affirming: bool = False
    specific_information: bool = True
    trust_score: float = Field(ge=0, le=1, default=0.5)
    trust_level: TrustLevel = TrustLevel.LOW
    trust_description: str = ""
    source_verification: SourceVerification = SourceVerification()
    request_feedback: bool = True
    response_id: str
    degraded: bool = False                  # Reply collaborator failed; message is the static notice


class OrchestratorConfig(BaseModel):
    """Configuration for the Conversation Orchestrator."""

    max_resources: int = Field(ge=1, default=5)
    max_knowledge: int = Field(ge=1, default=3)
    max_emergency_resources: int = Field(ge=0, default=2)   # Merged in front for crisis/high urgency
    feedback_log_size: int = Field(ge=1, default=500)


class FeedbackRecord(BaseModel):
    response_id: str
    user_hash: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    helpful: Optional[bool] = None
    comment: Optional[str] = None
    received_at: datetime
