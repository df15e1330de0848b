"""Tests for the FastAPI API endpoints."""

import pytest
from fastapi.testclient import TestClient

from ivor_core.api.app import create_app
from ivor_core.config import Settings
from ivor_core.knowledge.registry import KnowledgeRegistry
from ivor_core.models.trust import TrustConfig
from ivor_core.trust.engine import TrustScoreEngine


class FakeProber:
    async def probe(self, url: str) -> bool:
        return True


@pytest.fixture
def client():
    """Create a test client with fresh components and no network access."""
    registry = KnowledgeRegistry()
    trust_engine = TrustScoreEngine(config=TrustConfig(), prober=FakeProber())

    app = create_app(
        registry=registry,
        trust_engine=trust_engine,
        settings=Settings(max_resources=4),
    )

    return TestClient(app)


class TestChatEndpoints:
    def test_chat_turn(self, client):
        response = client.post("/chat", json={
            "text": "I want to learn about PrEP",
            "location": "manchester",
            "user_id": "user-1",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["journey_stage"] == "growth"
        assert data["journey_context"]["location"] == "manchester"
        assert data["knowledge"][0]["id"] == "prep-access-uk"
        assert 0 <= data["trust_score"] <= 1
        assert len(data["resources"]) <= 4
        assert data["response_id"]

    def test_chat_crisis_turn(self, client):
        response = client.post("/chat", json={
            "text": "I was just diagnosed with HIV and I'm terrified",
            "location": "london",
            "previous_stages": ["growth"],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["journey_stage"] == "crisis"
        assert data["follow_up_required"] is True
        assert data["journey_context"]["returning_user"] is True
        assert data["resources"][0]["emergency"] is True

    def test_empty_message_rejected(self, client):
        response = client.post("/chat", json={"text": "   "})
        assert response.status_code == 400

    def test_unknown_location_rejected(self, client):
        response = client.post("/chat", json={"text": "hello", "location": "atlantis"})
        assert response.status_code == 422

    def test_emergency(self, client):
        response = client.post("/emergency", json={"text": "", "location": "belfast"})
        assert response.status_code == 200
        data = response.json()
        assert data["journey_stage"] == "crisis"
        assert data["journey_context"]["urgency_level"] == "emergency"
        assert data["resources"][0]["emergency"] is True


class TestRegistryEndpoints:
    def test_list_regions(self, client):
        response = client.get("/regions")
        assert response.status_code == 200
        regions = {r["region"]: r for r in response.json()}
        assert len(regions) == 13
        assert regions["nationwide"]["display_name"] == "UK-wide"
        assert regions["london"]["resources"] > 0

    def test_query_resources(self, client):
        response = client.get("/resources", params={
            "stage": "crisis", "location": "glasgow",
        })
        assert response.status_code == 200
        ids = [r["id"] for r in response.json()]
        assert "waverley-care" in ids
        assert "56-dean-street" not in ids

    def test_query_resources_emergency_only(self, client):
        response = client.get("/resources", params={
            "stage": "crisis", "location": "london", "urgency": "emergency",
        })
        assert response.status_code == 200
        assert all(r["emergency"] for r in response.json())

    def test_query_resources_invalid_stage(self, client):
        response = client.get("/resources", params={"stage": "enlightenment"})
        assert response.status_code == 422

    def test_get_resource(self, client):
        response = client.get("/resources/samaritans")
        assert response.status_code == 200
        assert response.json()["phone"] == "116 123"

    def test_get_resource_not_found(self, client):
        response = client.get("/resources/does-not-exist")
        assert response.status_code == 404


class TestFeedbackEndpoints:
    def test_feedback_for_issued_response(self, client):
        turn = client.post("/chat", json={"text": "I want to learn more"}).json()
        response = client.post("/feedback", json={
            "response_id": turn["response_id"],
            "rating": 4,
            "helpful": True,
            "user_id": "user-1",
        })
        assert response.status_code == 200
        assert response.json() == {"recorded": True, "response_id": turn["response_id"]}

    def test_feedback_unknown_response(self, client):
        response = client.post("/feedback", json={"response_id": "nope", "rating": 3})
        assert response.status_code == 404

    def test_feedback_rating_out_of_range(self, client):
        response = client.post("/feedback", json={"response_id": "nope", "rating": 9})
        assert response.status_code == 422


class TestHealthEndpoints:
    def test_health(self, client):
        client.post("/chat", json={"text": "How do I get PrEP?"})
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["turns_handled"] == 1
        assert data["trust"]["probes_issued"] == 2
        assert data["trust"]["cache_size"] == 2

    def test_clear_expired_cache(self, client):
        response = client.post("/health/cache/clear-expired")
        assert response.status_code == 200
        assert response.json() == {"removed": 0}
