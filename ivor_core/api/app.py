"""
IVOR Core API — FastAPI endpoints.

Exposes the journey pipeline over HTTP:
- Chat turns and forced emergency responses
- Registry browsing (regions, resources)
- Feedback on issued responses
- System health
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ivor_core.config import Settings
from ivor_core.conversation.orchestrator import ConversationOrchestrator
from ivor_core.conversation.replies import ReplyGenerator
from ivor_core.errors import InvalidInputError
from ivor_core.journey.classifier import JourneyStageClassifier
from ivor_core.knowledge.registry import KnowledgeRegistry
from ivor_core.models.conversation import JourneyResponse, TurnRequest
from ivor_core.models.journey import JourneyStage, UrgencyLevel
from ivor_core.models.location import UKLocation
from ivor_core.models.resources import Resource
from ivor_core.trust.engine import TrustScoreEngine


# --- Request/Response Models ---

class FeedbackRequest(BaseModel):
    response_id: str
    rating: int = Field(ge=1, le=5)
    helpful: Optional[bool] = None
    comment: Optional[str] = None
    user_id: Optional[str] = None


class RegionInfo(BaseModel):
    region: str
    display_name: str
    resources: int
    knowledge: int


# --- Application Factory ---

def create_app(
    registry: Optional[KnowledgeRegistry] = None,
    trust_engine: Optional[TrustScoreEngine] = None,
    classifier: Optional[JourneyStageClassifier] = None,
    reply_generator: Optional[ReplyGenerator] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="IVOR Core API",
        description="Journey-aware support resources for Black queer communities in the UK",
        version="0.1.0",
    )

    # Initialize components
    settings = settings or Settings()
    reg = registry or KnowledgeRegistry()
    te = trust_engine or TrustScoreEngine(config=settings.trust_config())
    orchestrator = ConversationOrchestrator(
        registry=reg,
        trust_engine=te,
        classifier=classifier,
        reply_generator=reply_generator,
        config=settings.orchestrator_config(),
    )

    # Store components on app state for access in endpoints
    app.state.settings = settings
    app.state.registry = reg
    app.state.trust_engine = te
    app.state.orchestrator = orchestrator

    # === CONVERSATION ===

    @app.post("/chat", response_model=JourneyResponse)
    async def chat(req: TurnRequest):
        """Handle one conversational turn."""
        try:
            return await orchestrator.handle_turn(req)
        except InvalidInputError as e:
            raise HTTPException(400, str(e))

    @app.post("/emergency", response_model=JourneyResponse)
    async def emergency(req: TurnRequest):
        """Crisis response with emergency resources first, whatever the message says."""
        return await orchestrator.emergency_response(req)

    # === REGISTRY ===

    @app.get("/regions", response_model=List[RegionInfo])
    def list_regions():
        return [
            RegionInfo(
                region=region.value,
                display_name=reg.region_display_name(region),
                resources=len(reg.resources_by_region(region)),
                knowledge=len(reg.knowledge_by_region(region)),
            )
            for region in reg.available_regions()
        ]

    @app.get("/resources", response_model=List[Resource])
    def query_resources(
        stage: JourneyStage,
        location: UKLocation = UKLocation.UNKNOWN,
        urgency: Optional[UrgencyLevel] = None,
        category: Optional[str] = None,
    ):
        return reg.query_resources(stage, location, urgency, category)

    @app.get("/resources/{resource_id}", response_model=Resource)
    def get_resource(resource_id: str):
        resource = reg.get_resource(resource_id)
        if not resource:
            raise HTTPException(404, "Resource not found")
        return resource

    # === FEEDBACK ===

    @app.post("/feedback")
    def submit_feedback(req: FeedbackRequest):
        try:
            record = orchestrator.record_feedback(
                response_id=req.response_id,
                rating=req.rating,
                helpful=req.helpful,
                comment=req.comment,
                user_id=req.user_id,
            )
        except InvalidInputError:
            raise HTTPException(404, "Response not found")
        return {"recorded": True, "response_id": record.response_id}

    # === HEALTH ===

    @app.get("/health")
    def health():
        return orchestrator.get_system_health()

    @app.post("/health/cache/clear-expired")
    def clear_expired_cache():
        return {"removed": te.clear_expired_cache()}

    return app
