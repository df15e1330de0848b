"""Tests for resource and knowledge ranking."""

from datetime import datetime, timezone

from ivor_core.models.resources import CulturalCompetency, KnowledgeEntry, Resource
from ivor_core.ranking.ranker import rank_knowledge, rank_resources


def _make_resource(id: str, **overrides) -> Resource:
    fields = dict(
        id=id,
        title=id.title(),
        category="Support",
        journey_stages=("crisis",),
        locations=("london",),
        cost="free",
        emergency=False,
    )
    fields.update(overrides)
    return Resource(**fields)


def _make_entry(id: str, updated: datetime, community: bool = False) -> KnowledgeEntry:
    return KnowledgeEntry(
        id=id,
        title=id,
        content="...",
        category="Sexual Health",
        journey_stages=("growth",),
        locations=("unknown",),
        last_updated=updated,
        community_validated=community,
    )


class TestRankResources:
    def test_emergency_first(self):
        plain = _make_resource("plain")
        urgent = _make_resource("urgent", emergency=True)
        assert [r.id for r in rank_resources([plain, urgent])] == ["urgent", "plain"]

    def test_free_before_paid(self):
        paid = _make_resource("paid", cost="paid")
        nhs = _make_resource("nhs", cost="nhs_funded")
        sliding = _make_resource("sliding", cost="sliding_scale")
        ranked = rank_resources([paid, sliding, nhs])
        assert ranked[0].id == "nhs"
        assert [r.id for r in ranked[1:]] == ["paid", "sliding"]

    def test_culturally_specific_before_generic(self):
        generic = _make_resource("generic")
        specific = _make_resource(
            "specific", cultural_competency=CulturalCompetency(black_specific=True)
        )
        assert rank_resources([generic, specific])[0].id == "specific"

    def test_emergency_outranks_cost_and_culture(self):
        paid_emergency = _make_resource("paid_emergency", cost="paid", emergency=True)
        free_specific = _make_resource(
            "free_specific", cultural_competency=CulturalCompetency(lgbtq_specific=True)
        )
        assert rank_resources([free_specific, paid_emergency])[0].id == "paid_emergency"

    def test_ties_keep_input_order(self):
        items = [_make_resource(f"r{i}") for i in range(5)]
        assert [r.id for r in rank_resources(items)] == ["r0", "r1", "r2", "r3", "r4"]

    def test_empty(self):
        assert rank_resources([]) == []


class TestRankKnowledge:
    def test_more_recent_first(self):
        old = _make_entry("old", datetime(2023, 1, 1, tzinfo=timezone.utc))
        new = _make_entry("new", datetime(2025, 1, 1, tzinfo=timezone.utc))
        assert [e.id for e in rank_knowledge([old, new])] == ["new", "old"]

    def test_community_validated_beats_recency(self):
        old_validated = _make_entry("old", datetime(2022, 1, 1, tzinfo=timezone.utc), community=True)
        new = _make_entry("new", datetime(2025, 1, 1, tzinfo=timezone.utc))
        assert rank_knowledge([new, old_validated])[0].id == "old"

    def test_naive_and_aware_timestamps_rank_together(self):
        aware = _make_entry("aware", datetime(2025, 1, 1, tzinfo=timezone.utc))
        naive = _make_entry("naive", datetime(2025, 6, 1))
        assert naive.last_updated.tzinfo == timezone.utc
        assert [e.id for e in rank_knowledge([aware, naive])] == ["naive", "aware"]

    def test_ties_keep_input_order(self):
        when = datetime(2024, 6, 1, tzinfo=timezone.utc)
        entries = [_make_entry(f"k{i}", when) for i in range(4)]
        assert [e.id for e in rank_knowledge(entries)] == ["k0", "k1", "k2", "k3"]
