"""Tests for the Conversation Orchestrator pipeline."""

import asyncio
import time
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from ivor_core.conversation.orchestrator import ConversationOrchestrator, anonymize_user
from ivor_core.conversation.replies import DEGRADED_MESSAGE
from ivor_core.errors import InvalidInputError
from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.knowledge.registry import KnowledgeRegistry
from ivor_core.models.conversation import OrchestratorConfig, TurnRequest
from ivor_core.models.journey import (
    AccessPreference,
    Formality,
    JourneyStage,
    MemoryRecord,
    UrgencyLevel,
)
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import KnowledgeEntry, Resource
from ivor_core.models.trust import TrustConfig, TrustLevel
from ivor_core.trust.engine import TrustScoreEngine


class FakeProber:
    def __init__(self, default=True, delay=0.0):
        self.default = default
        self.delay = delay
        self.calls = []

    async def probe(self, url: str) -> bool:
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.default


class FailingReplies:
    async def generate(self, request):
        raise RuntimeError("model unavailable")


class EmptyReplies:
    async def generate(self, request):
        return "   "


class RecordingReplies:
    def __init__(self):
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        return f"reply for {request.stage.value}"


def _make_orchestrator(registry=None, prober=None, trust_config=None, **kwargs):
    trust_engine = TrustScoreEngine(config=trust_config, prober=prober or FakeProber())
    return ConversationOrchestrator(registry=registry, trust_engine=trust_engine, **kwargs)


def _turn(orchestrator, text, **fields):
    return asyncio.run(orchestrator.handle_turn(TurnRequest(text=text, **fields)))


class TestTurnValidation:
    def test_empty_text_rejected(self):
        orchestrator = _make_orchestrator()
        with pytest.raises(InvalidInputError):
            _turn(orchestrator, "")
        with pytest.raises(InvalidInputError):
            _turn(orchestrator, "   \n ")
        assert orchestrator.turns_handled == 0


class TestScenarios:
    def setup_method(self):
        self.registry = KnowledgeRegistry()

    def test_new_hiv_diagnosis_in_london(self):
        orchestrator = _make_orchestrator(self.registry)
        response = _turn(
            orchestrator, "I was just diagnosed with HIV and I'm terrified", location="london"
        )

        assert response.journey_stage == JourneyStage.CRISIS
        assert response.journey_context.urgency_level == UrgencyLevel.HIGH
        assert response.follow_up_required is True
        assert response.resources[0].id == "56-dean-street"
        assert all(r.emergency for r in response.resources[:3])
        knowledge_ids = [k.id for k in response.knowledge]
        assert "london-sexual-health-clinics" in knowledge_ids
        assert "hiv-treatment-uk" in knowledge_ids
        assert response.culturally_affirming is True
        assert response.specific_information is True
        assert response.degraded is False

    def test_prep_question_in_manchester(self):
        orchestrator = _make_orchestrator(self.registry)
        response = _turn(orchestrator, "I want to learn about PrEP", location="manchester")

        assert response.journey_stage == JourneyStage.GROWTH
        assert response.follow_up_required is False
        assert response.knowledge[0].id == "prep-access-uk"
        assert "manchester-sexual-health-hub" in [r.id for r in response.resources]
        assert response.next_stage_pathway.startswith("Next: Community Healing")

    def test_limits_respected(self):
        orchestrator = _make_orchestrator(
            self.registry, config=OrchestratorConfig(max_resources=2, max_knowledge=1)
        )
        response = _turn(orchestrator, "I was just diagnosed with HIV", location="london")
        assert len(response.resources) == 2
        assert len(response.knowledge) == 1

    def test_all_resources_serve_the_stage(self):
        orchestrator = _make_orchestrator(self.registry)
        response = _turn(orchestrator, "I want to organise a campaign", location="glasgow")
        assert response.journey_stage == JourneyStage.ADVOCACY
        assert all(JourneyStage.ADVOCACY in r.journey_stages for r in response.resources)

    def test_ambiguous_message_is_not_specific(self):
        orchestrator = _make_orchestrator(self.registry)
        response = _turn(orchestrator, "hello there")
        assert response.journey_stage == JourneyStage.GROWTH
        assert response.specific_information is False

    def test_same_request_gives_same_ranking(self):
        orchestrator = _make_orchestrator(self.registry)
        request = dict(text="I was just diagnosed with HIV and I'm terrified", location="london")

        first = _turn(orchestrator, **request)
        second = _turn(orchestrator, **request)

        assert [r.id for r in first.resources] == [r.id for r in second.resources]
        assert [k.id for k in first.knowledge] == [k.id for k in second.knowledge]
        assert first.trust_score == pytest.approx(second.trust_score)

    def test_trust_fields_populated(self):
        prober = FakeProber()
        orchestrator = _make_orchestrator(self.registry, prober=prober)
        response = _turn(orchestrator, "How do I get PrEP?", location="manchester")

        assert 0.0 <= response.trust_score <= 1.0
        assert response.trust_description
        assert response.source_verification.total >= 2
        # Organisation names are never probed.
        assert "Terrence Higgins Trust" not in prober.calls
        assert "https://menrus.co.uk" in prober.calls


class TestFallbacks:
    def test_generic_fallback_when_nothing_matches(self):
        generic = Resource(
            id="generic-helpline",
            title="Generic Helpline",
            category="Support",
            journey_stages=("crisis",),
            locations=("unknown",),
            phone="0800 000 000",
        )
        registry = KnowledgeRegistry([RegionalProvider(UKRegion.NATIONWIDE, (generic,), ())])
        orchestrator = _make_orchestrator(registry)

        response = _turn(orchestrator, "I've been evicted", location="leeds")

        assert [r.id for r in response.resources] == ["generic-helpline"]
        assert response.specific_information is False
        assert response.follow_up_required is True

    def test_naive_knowledge_timestamps_do_not_break_a_turn(self):
        resource = Resource(
            id="helpline", title="Helpline", category="Support",
            journey_stages=("growth",), locations=("unknown",),
        )
        entries = tuple(
            KnowledgeEntry(
                id=id, title=id, content="content", category="General",
                journey_stages=("growth",), locations=("unknown",), last_updated=updated,
            )
            for id, updated in (
                ("aware", datetime(2025, 1, 1, tzinfo=timezone.utc)),
                ("naive", datetime(2025, 6, 1)),
            )
        )
        registry = KnowledgeRegistry([RegionalProvider(UKRegion.NATIONWIDE, (resource,), entries)])
        orchestrator = _make_orchestrator(registry)

        response = _turn(orchestrator, "hello there", location="london")

        assert [k.id for k in response.knowledge] == ["naive", "aware"]

    def test_empty_registry_gives_neutral_trust(self):
        orchestrator = _make_orchestrator(KnowledgeRegistry([]))
        response = _turn(orchestrator, "I want to learn more")

        assert response.resources == []
        assert response.knowledge == []
        assert response.trust_score == 0.5
        assert response.trust_level == TrustLevel.LOW
        assert response.source_verification.total == 0

    def test_slow_sources_do_not_block_the_turn(self):
        prober = FakeProber(delay=1.0)
        orchestrator = _make_orchestrator(
            KnowledgeRegistry(),
            prober=prober,
            trust_config=TrustConfig(turn_deadline_seconds=0.05),
        )

        started = time.monotonic()
        response = _turn(orchestrator, "How do I get PrEP?")

        assert time.monotonic() - started < 1.0
        assert response.source_verification.verified == 0


class TestCollaborators:
    def test_failing_reply_generator_degrades(self):
        orchestrator = _make_orchestrator(reply_generator=FailingReplies())
        response = _turn(orchestrator, "I was just diagnosed with HIV", location="london")

        assert response.degraded is True
        assert response.message == DEGRADED_MESSAGE
        assert response.resources
        assert orchestrator.degraded_replies == 1

    def test_empty_reply_degrades(self):
        orchestrator = _make_orchestrator(reply_generator=EmptyReplies())
        assert _turn(orchestrator, "I want to learn more").degraded is True

    def test_reply_request_carries_turn_context(self):
        replies = RecordingReplies()
        orchestrator = _make_orchestrator(reply_generator=replies)
        response = _turn(orchestrator, "Could you please advise on PrEP", location="manchester")

        request = replies.requests[0]
        assert response.message == "reply for growth"
        assert request.formality == Formality.FORMAL
        assert request.topic == "sexual health"
        assert [r.id for r in request.resources] == [r.id for r in response.resources]

    def test_memory_loader_failure_is_tolerated(self):
        async def broken_loader(user_id):
            raise ConnectionError("memory store down")

        orchestrator = _make_orchestrator(memory_loader=broken_loader)
        response = _turn(orchestrator, "I want to learn more", user_id="u1")
        assert response.journey_stage == JourneyStage.GROWTH

    def test_loaded_memories_shape_formality(self):
        async def loader(user_id):
            return [MemoryRecord(memory_type="communication_style", key="tone", value="formal")]

        orchestrator = _make_orchestrator(memory_loader=loader)
        response = _turn(orchestrator, "where are the clinics", user_id="u1")
        assert response.journey_context.formality == Formality.FORMAL

    def test_request_memories_used_without_loader(self):
        orchestrator = _make_orchestrator()
        memory = MemoryRecord(memory_type="communication_style", key="tone", value="casual")
        response = _turn(orchestrator, "where are the clinics", memories=[memory.model_dump()])
        assert response.journey_context.formality == Formality.CASUAL


class TestEmergencyResponse:
    def test_forced_crisis_context(self):
        orchestrator = _make_orchestrator()
        response = asyncio.run(orchestrator.emergency_response(
            TurnRequest(text="", location="bristol")
        ))

        context = response.journey_context
        assert response.journey_stage == JourneyStage.CRISIS
        assert context.urgency_level == UrgencyLevel.EMERGENCY
        assert context.resource_access_preference == AccessPreference.PHONE
        assert response.follow_up_required is True
        assert response.resources[0].emergency is True

    def test_overrides_calm_text(self):
        orchestrator = _make_orchestrator()
        response = asyncio.run(orchestrator.emergency_response(
            TurnRequest(text="I want to learn about courses")
        ))
        assert response.journey_stage == JourneyStage.CRISIS

    def test_topic_falls_back_to_remembered_need(self):
        replies = RecordingReplies()
        orchestrator = _make_orchestrator(reply_generator=replies)
        memory = MemoryRecord(memory_type="support_need", key="need", value="Housing", importance=0.9)

        asyncio.run(orchestrator.emergency_response(
            TurnRequest(text="", memories=[memory.model_dump()])
        ))

        assert replies.requests[0].topic == "housing"

    def test_loaded_memories_used(self):
        async def loader(user_id):
            return [MemoryRecord(memory_type="communication_style", key="tone", value="formal")]

        orchestrator = _make_orchestrator(memory_loader=loader)
        response = asyncio.run(orchestrator.emergency_response(
            TurnRequest(text="", user_id="u1")
        ))
        assert response.journey_context.formality == Formality.FORMAL


class TestFeedback:
    def test_feedback_for_issued_response(self):
        orchestrator = _make_orchestrator()
        response = _turn(orchestrator, "I want to learn more")

        record = orchestrator.record_feedback(
            response.response_id, rating=5, helpful=True, user_id="someone@example.org"
        )

        assert record.user_hash == anonymize_user("someone@example.org")
        assert record.user_hash != "someone@example.org"
        assert len(record.user_hash) == 16
        assert orchestrator.feedback_log == [record]

    def test_unknown_response_rejected(self):
        orchestrator = _make_orchestrator()
        with pytest.raises(InvalidInputError):
            orchestrator.record_feedback("not-issued", rating=3)

    def test_rating_bounds(self):
        orchestrator = _make_orchestrator()
        response = _turn(orchestrator, "I want to learn more")
        with pytest.raises(ValidationError):
            orchestrator.record_feedback(response.response_id, rating=6)

    def test_response_ids_unique(self):
        orchestrator = _make_orchestrator()
        ids = {_turn(orchestrator, "I want to learn more").response_id for _ in range(3)}
        assert len(ids) == 3


class TestHealth:
    def test_health_after_turns(self):
        orchestrator = _make_orchestrator()
        _turn(orchestrator, "I want to learn about PrEP")
        health = orchestrator.get_system_health()

        assert health["status"] == "healthy"
        assert health["turns_handled"] == 1
        assert health["registry"]["regions"] == len(UKRegion)
        assert "cache_size" in health["trust"]

    def test_mostly_degraded_reports_degraded(self):
        orchestrator = _make_orchestrator(reply_generator=FailingReplies())
        _turn(orchestrator, "I want to learn more")
        assert orchestrator.get_system_health()["status"] == "degraded"
