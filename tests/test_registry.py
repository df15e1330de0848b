"""Tests for the Regional Knowledge Registry."""

from datetime import datetime, timezone

import pytest

from ivor_core.errors import RegistryIntegrityError
from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.knowledge.registry import KnowledgeRegistry
from ivor_core.models.journey import JourneyStage, UrgencyLevel
from ivor_core.models.location import UKLocation, UKRegion
from ivor_core.models.resources import KnowledgeEntry, Resource


def _make_resource(id: str, **overrides) -> Resource:
    fields = dict(
        id=id,
        title=id,
        category="Support",
        journey_stages=("crisis",),
        locations=("unknown",),
    )
    fields.update(overrides)
    return Resource(**fields)


def _make_entry(id: str, **overrides) -> KnowledgeEntry:
    fields = dict(
        id=id,
        title=id,
        content="content",
        category="General",
        journey_stages=("growth",),
        locations=("unknown",),
        last_updated=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return KnowledgeEntry(**fields)


class TestRegistryLoading:
    def setup_method(self):
        self.registry = KnowledgeRegistry()

    def test_default_providers_load(self):
        assert self.registry.resource_count > 40
        assert self.registry.knowledge_count > 10

    def test_every_region_has_a_provider(self):
        assert set(self.registry.available_regions()) == set(UKRegion)

    def test_duplicate_resource_id_rejected(self):
        a = RegionalProvider(UKRegion.LONDON, (_make_resource("dup"),), ())
        b = RegionalProvider(UKRegion.WALES, (_make_resource("dup"),), ())
        with pytest.raises(RegistryIntegrityError):
            KnowledgeRegistry([a, b])

    def test_duplicate_knowledge_id_rejected(self):
        a = RegionalProvider(UKRegion.LONDON, (), (_make_entry("dup"),))
        b = RegionalProvider(UKRegion.NATIONWIDE, (), (_make_entry("dup"),))
        with pytest.raises(RegistryIntegrityError):
            KnowledgeRegistry([a, b])

    def test_lookups(self):
        assert self.registry.get_resource("samaritans").title == "Samaritans"
        assert self.registry.get_knowledge("prep-access-uk") is not None
        assert self.registry.get_resource("does-not-exist") is None
        assert self.registry.get_knowledge("does-not-exist") is None

    def test_region_tables(self):
        london_ids = {r.id for r in self.registry.resources_by_region(UKRegion.LONDON)}
        assert "56-dean-street" in london_ids
        assert "samaritans" not in london_ids
        assert self.registry.knowledge_by_region(UKRegion.NORTH_WEST)

    def test_region_display_name(self):
        assert self.registry.region_display_name(UKRegion.NATIONWIDE) == "UK-wide"
        assert self.registry.region_display_name(UKRegion.YORKSHIRE) == "Yorkshire and the Humber"


class TestQueryResources:
    def setup_method(self):
        self.registry = KnowledgeRegistry()

    def test_results_always_serve_requested_stage(self):
        for stage in JourneyStage:
            for location in UKLocation:
                for resource in self.registry.query_resources(stage, location):
                    assert stage in resource.journey_stages

    def test_nationwide_resources_reach_every_location(self):
        for location in UKLocation:
            ids = [r.id for r in self.registry.query_resources(JourneyStage.CRISIS, location)]
            assert "samaritans" in ids

    def test_other_regions_excluded(self):
        ids = [r.id for r in self.registry.query_resources(JourneyStage.CRISIS, UKLocation.GLASGOW)]
        assert "56-dean-street" not in ids
        assert "waverley-care" in ids

    def test_same_region_locations_included(self):
        # Liverpool and Manchester share the North West region.
        ids = [r.id for r in self.registry.query_resources(JourneyStage.GROWTH, UKLocation.LIVERPOOL)]
        assert "africa-rainbow-family-manchester" in ids

    def test_other_urban_services_stay_local(self):
        # Newcastle services are tagged other_urban, which resolves to the nationwide catch-all.
        urban = [r.id for r in self.registry.query_resources(JourneyStage.CRISIS, UKLocation.OTHER_URBAN)]
        rural = [r.id for r in self.registry.query_resources(JourneyStage.CRISIS, UKLocation.RURAL)]
        unknown = [r.id for r in self.registry.query_resources(JourneyStage.CRISIS, UKLocation.UNKNOWN)]
        assert "akt-newcastle" in urban
        assert "akt-newcastle" not in rural
        assert "akt-newcastle" not in unknown
        assert "samaritans" in rural and "samaritans" in unknown

    def test_emergency_urgency_restricts_to_emergency(self):
        results = self.registry.query_resources(
            JourneyStage.CRISIS, UKLocation.LONDON, urgency=UrgencyLevel.EMERGENCY
        )
        assert results
        assert all(r.emergency for r in results)

    def test_category_filter_is_case_insensitive_substring(self):
        results = self.registry.query_resources(
            JourneyStage.CRISIS, UKLocation.LONDON, category="SEXUAL health"
        )
        assert {r.id for r in results} == {"56-dean-street", "menrus-platform"}

    def test_no_match_returns_empty_list(self):
        results = self.registry.query_resources(
            JourneyStage.ADVOCACY, UKLocation.RURAL, category="no such category"
        )
        assert results == []

    def test_results_are_ranked(self):
        results = self.registry.query_resources(JourneyStage.CRISIS, UKLocation.LONDON)
        flags = [r.emergency for r in results]
        assert flags == sorted(flags, reverse=True)


class TestEmergencyAndCulturalResources:
    def setup_method(self):
        self.registry = KnowledgeRegistry()

    def test_emergency_resources_all_emergency(self):
        results = self.registry.emergency_resources(UKLocation.BRISTOL)
        assert results
        assert all(r.emergency for r in results)
        assert "akt-bristol" in [r.id for r in results]

    def test_uk_wide_emergency_resources_exclude_city_services(self):
        unknown = [r.id for r in self.registry.emergency_resources(UKLocation.UNKNOWN)]
        assert unknown
        assert "akt-newcastle" not in unknown
        assert "akt-newcastle" in [r.id for r in self.registry.emergency_resources(UKLocation.OTHER_URBAN)]

    def test_round_the_clock_services_first(self):
        results = self.registry.emergency_resources(UKLocation.LONDON)
        assert "24/7" in results[0].availability
        first_non_24_7 = next(i for i, r in enumerate(results) if "24/7" not in r.availability)
        assert all("24/7" not in r.availability for r in results[first_non_24_7:])

    def test_culturally_specific_resources(self):
        results = self.registry.culturally_specific_resources(
            JourneyStage.COMMUNITY_HEALING, UKLocation.BIRMINGHAM
        )
        assert results
        assert all(r.culturally_specific for r in results)
        assert "unmuted-birmingham" in [r.id for r in results]


class TestKnowledgeQueries:
    def setup_method(self):
        self.registry = KnowledgeRegistry()

    def test_topic_matches_tags(self):
        ids = [e.id for e in self.registry.query_knowledge("prep", JourneyStage.GROWTH, UKLocation.MANCHESTER)]
        assert "prep-access-uk" in ids

    def test_none_topic_matches_everything_for_stage(self):
        results = self.registry.query_knowledge(None, JourneyStage.ADVOCACY, UKLocation.LONDON)
        assert results
        assert all(JourneyStage.ADVOCACY in e.journey_stages for e in results)

    def test_community_validated_first(self):
        results = self.registry.query_knowledge("sexual health", JourneyStage.GROWTH, UKLocation.UNKNOWN)
        validated = [e.community_validated for e in results]
        assert validated == sorted(validated, reverse=True)

    def test_health_knowledge_for_health_query(self):
        results = self.registry.health_knowledge("How do I get PrEP?", JourneyStage.GROWTH)
        ids = [e.id for e in results]
        assert "prep-access-uk" in ids
        assert all(any("menrus.co.uk" in s.lower() for s in e.sources) for e in results)

    def test_health_knowledge_empty_for_other_queries(self):
        assert self.registry.health_knowledge("Where can I find housing?", JourneyStage.CRISIS) == []

    def test_health_knowledge_location_filter(self):
        anywhere = [e.id for e in self.registry.health_knowledge("hiv testing", JourneyStage.CRISIS)]
        manchester = [
            e.id for e in self.registry.health_knowledge(
                "hiv testing", JourneyStage.CRISIS, UKLocation.MANCHESTER
            )
        ]
        assert "london-sexual-health-clinics" in anywhere
        assert "london-sexual-health-clinics" not in manchester
        assert "hiv-treatment-uk" in manchester
