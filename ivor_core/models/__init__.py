"""IVOR core data models."""

from ivor_core.models.conversation import (
    FeedbackRecord,
    JourneyResponse,
    OrchestratorConfig,
    ReplyRequest,
    TurnRequest,
)
from ivor_core.models.journey import (
    STAGE_ORDER,
    AccessPreference,
    CommunityConnectionLevel,
    EmotionalState,
    Formality,
    JourneyContext,
    JourneyStage,
    MemoryRecord,
    UrgencyLevel,
    next_stage,
)
from ivor_core.models.location import UKLocation, UKRegion, region_for_location
from ivor_core.models.resources import (
    CostTier,
    CulturalCompetency,
    KnowledgeEntry,
    Resource,
    VerificationStatus,
)
from ivor_core.models.trust import (
    SourceVerification,
    TrustCacheEntry,
    TrustConfig,
    TrustInterpretation,
    TrustLevel,
)

__all__ = [
    "STAGE_ORDER",
    "AccessPreference",
    "CommunityConnectionLevel",
    "CostTier",
    "CulturalCompetency",
    "EmotionalState",
    "FeedbackRecord",
    "Formality",
    "JourneyContext",
    "JourneyResponse",
    "JourneyStage",
    "KnowledgeEntry",
    "MemoryRecord",
    "OrchestratorConfig",
    "ReplyRequest",
    "Resource",
    "SourceVerification",
    "TrustCacheEntry",
    "TrustConfig",
    "TrustInterpretation",
    "TrustLevel",
    "TurnRequest",
    "UKLocation",
    "UKRegion",
    "UrgencyLevel",
    "VerificationStatus",
    "next_stage",
    "region_for_location",
]
