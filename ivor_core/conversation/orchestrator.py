"""
Conversation Orchestrator — one user turn, end to end.

Pipeline per turn:
  1. Validate the message text
  2. Classify (stage, urgency, tone) and extract a topic hint
  3. Query resources with fallback: local -> nationwide -> generic
  4. Query knowledge: clinically-sourced health knowledge first, then topical
  5. Validate every knowledge source in one bounded batch, then score
  6. Hand off to the reply collaborator (degraded mode if it fails)
  7. Assemble the JourneyResponse

Registry misses and probe failures never abort a turn. Only an empty message
is rejected; a failing reply collaborator yields a degraded response.
"""

import hashlib
import logging
from collections import OrderedDict, deque
from datetime import datetime, timezone
from typing import Awaitable, Callable, Deque, Dict, Iterable, List, Optional
from uuid import uuid4

from ivor_core.conversation.replies import DEGRADED_MESSAGE, ReplyGenerator, TemplateReplyGenerator
from ivor_core.errors import CollaboratorError, InvalidInputError
from ivor_core.journey.classifier import JourneyStageClassifier
from ivor_core.knowledge.registry import KnowledgeRegistry
from ivor_core.models.conversation import (
    FeedbackRecord,
    JourneyResponse,
    OrchestratorConfig,
    ReplyRequest,
    TurnRequest,
)
from ivor_core.models.journey import (
    AccessPreference,
    CommunityConnectionLevel,
    EmotionalState,
    JourneyContext,
    JourneyStage,
    MemoryRecord,
    UrgencyLevel,
)
from ivor_core.models.location import UKLocation
from ivor_core.models.resources import KnowledgeEntry, Resource
from ivor_core.ranking.ranker import rank_knowledge, rank_resources
from ivor_core.trust.engine import TrustScoreEngine

logger = logging.getLogger(__name__)

MemoryLoader = Callable[[Optional[str]], Awaitable[List[MemoryRecord]]]

NEUTRAL_TRUST_SCORE = 0.5


def _dedupe(items: Iterable) -> List:
    seen = set()
    unique = []
    for item in items:
        if item.id not in seen:
            seen.add(item.id)
            unique.append(item)
    return unique


def anonymize_user(user_id: Optional[str]) -> Optional[str]:
    if not user_id:
        return None
    return hashlib.sha256(user_id.encode("utf-8")).hexdigest()[:16]


class ConversationOrchestrator:
    """Composes classifier, registry, trust engine and reply collaborator per turn."""

    def __init__(
        self,
        registry: Optional[KnowledgeRegistry] = None,
        trust_engine: Optional[TrustScoreEngine] = None,
        classifier: Optional[JourneyStageClassifier] = None,
        reply_generator: Optional[ReplyGenerator] = None,
        config: Optional[OrchestratorConfig] = None,
        memory_loader: Optional[MemoryLoader] = None,
    ):
        self.registry = registry or KnowledgeRegistry()
        self.trust_engine = trust_engine or TrustScoreEngine()
        self.classifier = classifier or JourneyStageClassifier()
        self.reply_generator = reply_generator or TemplateReplyGenerator()
        self.config = config or OrchestratorConfig()
        self.memory_loader = memory_loader

        self._feedback: Deque[FeedbackRecord] = deque(maxlen=self.config.feedback_log_size)
        self._issued: "OrderedDict[str, datetime]" = OrderedDict()
        self.turns_handled = 0
        self.degraded_replies = 0

    # --- Turns ---

    async def handle_turn(self, request: TurnRequest) -> JourneyResponse:
        """Run the full pipeline for one message."""
        if not request.text or not request.text.strip():
            raise InvalidInputError("Message text is empty")

        memories = await self._load_memories(request)
        classification = self.classifier.classify(
            request.text,
            previous_stages=request.previous_stages,
            location=request.location,
            memories=memories,
        )
        topic = self.classifier.extract_topic(request.text, memories)

        return await self._respond(
            text=request.text,
            context=classification.context,
            topic=topic,
            next_stage_pathway=classification.next_stage_pathway,
            ambiguous=classification.ambiguous,
        )

    async def emergency_response(self, request: TurnRequest) -> JourneyResponse:
        """Crisis response regardless of what the text says. Empty text is allowed."""
        text = request.text.strip() if request.text else ""
        previous = list(request.previous_stages)
        memories = await self._load_memories(request)
        context = JourneyContext(
            stage=JourneyStage.CRISIS,
            emotional_state=EmotionalState.OVERWHELMED,
            urgency_level=UrgencyLevel.EMERGENCY,
            formality=self.classifier.detect_formality(text, memories),
            location=request.location,
            community_connection=CommunityConnectionLevel.ISOLATED,
            first_time=len(previous) == 0,
            returning_user=len(previous) > 0,
            previous_stages=previous,
            resource_access_preference=AccessPreference.PHONE,
        )
        return await self._respond(
            text=text,
            context=context,
            topic=self.classifier.extract_topic(text, memories),
            next_stage_pathway=self.classifier.next_stage_pathway(JourneyStage.CRISIS, previous),
            ambiguous=False,
        )

    async def _respond(
        self,
        text: str,
        context: JourneyContext,
        topic: Optional[str],
        next_stage_pathway: Optional[str],
        ambiguous: bool,
    ) -> JourneyResponse:
        resources, found_specific = self._gather_resources(context, topic)
        knowledge = self._gather_knowledge(text, context, topic)

        # Trust: one probe batch for the turn, bounded by the turn deadline.
        sources = [s for entry in knowledge for s in entry.sources]
        verdicts = await self.trust_engine.validate_multiple_urls(
            sources, deadline=self.trust_engine.config.turn_deadline_seconds,
        )
        scores = [self.trust_engine.score_knowledge(entry, verdicts) for entry in knowledge]
        scores += [self.trust_engine.calculate_resource_trust_score(r) for r in resources]
        trust_score = sum(scores) / len(scores) if scores else NEUTRAL_TRUST_SCORE
        interpretation = self.trust_engine.get_trust_score_interpretation(trust_score)
        verification = self.trust_engine.source_verification(knowledge, verdicts)

        degraded = False
        try:
            message = await self._generate_reply(ReplyRequest(
                text=text,
                stage=context.stage,
                emotional_state=context.emotional_state,
                formality=context.formality,
                resources=resources,
                knowledge=knowledge,
                next_stage_pathway=next_stage_pathway,
                topic=topic,
            ))
        except CollaboratorError as e:
            logger.warning(f"Degraded reply mode: {e}")
            message = DEGRADED_MESSAGE
            degraded = True
            self.degraded_replies += 1

        follow_up = (
            context.stage == JourneyStage.CRISIS
            or context.urgency_level == UrgencyLevel.EMERGENCY
            or not found_specific
            or context.community_connection == CommunityConnectionLevel.ISOLATED
            or (context.first_time and context.stage == JourneyStage.STABILIZATION)
        )

        response = JourneyResponse(
            message=message,
            journey_stage=context.stage,
            journey_context=context,
            next_stage_pathway=next_stage_pathway,
            resources=resources,
            knowledge=knowledge,
            follow_up_required=follow_up,
            culturally_affirming=any(r.culturally_specific for r in resources),
            specific_information=found_specific and not ambiguous,
            trust_score=round(trust_score, 4),
            trust_level=interpretation.level,
            trust_description=interpretation.description,
            source_verification=verification,
            request_feedback=True,
            response_id=str(uuid4()),
            degraded=degraded,
        )
        self._remember_response(response.response_id)
        self.turns_handled += 1

        logger.info(
            f"Turn handled: stage={context.stage.value} "
            f"region={self.registry.region_for_location(context.location).value} "
            f"urgency={context.urgency_level.value} resources={len(resources)} "
            f"knowledge={len(knowledge)} trust={trust_score:.2f} degraded={degraded}"
        )
        return response

    # --- Pipeline steps ---

    async def _load_memories(self, request: TurnRequest) -> List[MemoryRecord]:
        memories = list(request.memories)
        if self.memory_loader is None:
            return memories
        try:
            memories.extend(await self.memory_loader(request.user_id))
        except Exception as e:
            # Memory store outage: continue with whatever the caller sent.
            logger.warning(f"Memory store unavailable, continuing without stored memories: {e}")
        return memories

    def _gather_resources(self, context: JourneyContext, topic: Optional[str]):
        """Returns (resources, found_specific)."""
        stage, location, urgency = context.stage, context.location, context.urgency_level

        primary = self.registry.query_resources(stage, location, urgency, topic)
        if not primary:
            logger.debug(f"No {stage.value} resources for {location.value}, trying nationwide")
            primary = self.registry.query_resources(stage, UKLocation.UNKNOWN, urgency, topic)

        found_specific = bool(primary)
        if not primary:
            primary = self.registry.query_resources(stage, UKLocation.UNKNOWN)

        merged: List[Resource] = []
        if stage == JourneyStage.CRISIS or urgency in (UrgencyLevel.EMERGENCY, UrgencyLevel.HIGH):
            limit = self.config.max_emergency_resources
            merged.extend(self.registry.emergency_resources(location)[:limit])
        merged.extend(primary)
        merged.extend(self.registry.culturally_specific_resources(stage, location))

        ranked = rank_resources(_dedupe(merged))
        return ranked[: self.config.max_resources], found_specific

    def _gather_knowledge(
        self, text: str, context: JourneyContext, topic: Optional[str]
    ) -> List[KnowledgeEntry]:
        stage, location = context.stage, context.location

        entries = self.registry.health_knowledge(text, stage, location)
        if not entries:
            entries = self.registry.query_knowledge(topic, stage, location)
        if not entries and location != UKLocation.UNKNOWN:
            entries = self.registry.query_knowledge(topic, stage, UKLocation.UNKNOWN)

        return rank_knowledge(_dedupe(entries))[: self.config.max_knowledge]

    async def _generate_reply(self, request: ReplyRequest) -> str:
        try:
            message = await self.reply_generator.generate(request)
        except Exception as e:
            raise CollaboratorError("reply_generator", str(e) or e.__class__.__name__) from e
        if not message or not message.strip():
            raise CollaboratorError("reply_generator", "empty reply")
        return message

    # --- Feedback ---

    def _remember_response(self, response_id: str) -> None:
        self._issued[response_id] = datetime.now(timezone.utc)
        while len(self._issued) > self.config.feedback_log_size:
            self._issued.popitem(last=False)

    def record_feedback(
        self,
        response_id: str,
        rating: int,
        helpful: Optional[bool] = None,
        comment: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> FeedbackRecord:
        """Attach feedback to a recently issued response. User ids are stored hashed."""
        if response_id not in self._issued:
            raise InvalidInputError(f"Unknown response id: {response_id}")

        record = FeedbackRecord(
            response_id=response_id,
            user_hash=anonymize_user(user_id),
            rating=rating,
            helpful=helpful,
            comment=comment,
            received_at=datetime.now(timezone.utc),
        )
        self._feedback.append(record)
        logger.info(f"Feedback recorded for {response_id}: rating={rating}")
        return record

    @property
    def feedback_log(self) -> List[FeedbackRecord]:
        return list(self._feedback)

    # --- Health ---

    def get_system_health(self) -> Dict:
        trust_health = self.trust_engine.get_system_health()
        degraded_ratio = (self.degraded_replies / self.turns_handled) if self.turns_handled else 0.0
        return {
            "status": "degraded" if degraded_ratio > 0.5 else "healthy",
            "registry": {
                "resources": self.registry.resource_count,
                "knowledge": self.registry.knowledge_count,
                "regions": len(self.registry.available_regions()),
            },
            "trust": trust_health,
            "turns_handled": self.turns_handled,
            "degraded_replies": self.degraded_replies,
            "feedback_received": len(self._feedback),
        }
