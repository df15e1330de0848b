"""
Regional Knowledge Registry — static catalog of resources and knowledge.

Aggregates one RegionalProvider per UK region plus the nationwide provider.
Loaded once at construction and immutable afterwards; every query is a pure
filter over the loaded tables followed by ranking.

Location resolution: an item matches a target location if its locations
contain the target itself, `unknown` (UK-wide), or any location that resolves
to the same region as the target. The nationwide region is a catch-all, so
`other_urban`, `rural` and `unknown` targets do not share each other's items.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence, Set

from ivor_core.errors import RegistryIntegrityError
from ivor_core.knowledge.providers import (
    east_england,
    east_midlands,
    london,
    nationwide,
    north_east,
    north_west,
    northern_ireland,
    scotland,
    south_east,
    south_west,
    wales,
    west_midlands,
    yorkshire,
)
from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.journey import JourneyStage, UrgencyLevel
from ivor_core.models.location import (
    REGION_DISPLAY_NAMES,
    UKLocation,
    UKRegion,
    locations_in_region,
    region_for_location,
)
from ivor_core.models.resources import KnowledgeEntry, Resource
from ivor_core.ranking.ranker import rank_knowledge, rank_resources

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS: Sequence[RegionalProvider] = (
    london.PROVIDER,
    north_west.PROVIDER,
    west_midlands.PROVIDER,
    yorkshire.PROVIDER,
    south_east.PROVIDER,
    south_west.PROVIDER,
    east_england.PROVIDER,
    east_midlands.PROVIDER,
    north_east.PROVIDER,
    scotland.PROVIDER,
    wales.PROVIDER,
    northern_ireland.PROVIDER,
    nationwide.PROVIDER,
)

HEALTH_KEYWORDS = (
    "hiv", "prep", "pep", "sexual health", "sti", "testing", "treatment",
)

_HEALTH_PATTERNS = {k: re.compile(rf"\b{re.escape(k)}s?\b") for k in HEALTH_KEYWORDS}

HEALTH_SOURCE = "menrus.co.uk"


def _is_round_the_clock(resource: Resource) -> bool:
    return "24/7" in resource.availability


class KnowledgeRegistry:
    """
    Immutable, in-memory catalog of regional support resources and knowledge.

    Raises RegistryIntegrityError at construction if two items share an id.
    Queries never fall back on their own; an empty list is a valid answer.
    """

    def __init__(self, providers: Optional[Iterable[RegionalProvider]] = None):
        providers = list(DEFAULT_PROVIDERS if providers is None else providers)

        self._resources: List[Resource] = []
        self._knowledge: List[KnowledgeEntry] = []
        self._resources_by_id: Dict[str, Resource] = {}
        self._knowledge_by_id: Dict[str, KnowledgeEntry] = {}
        self._region_resources: Dict[UKRegion, List[Resource]] = {}
        self._region_knowledge: Dict[UKRegion, List[KnowledgeEntry]] = {}

        for provider in providers:
            for resource in provider.resources:
                if resource.id in self._resources_by_id:
                    raise RegistryIntegrityError(
                        f"Duplicate resource id '{resource.id}' in {provider.region.value}"
                    )
                self._resources_by_id[resource.id] = resource
                self._resources.append(resource)
                self._region_resources.setdefault(provider.region, []).append(resource)
            for entry in provider.knowledge:
                if entry.id in self._knowledge_by_id:
                    raise RegistryIntegrityError(
                        f"Duplicate knowledge id '{entry.id}' in {provider.region.value}"
                    )
                self._knowledge_by_id[entry.id] = entry
                self._knowledge.append(entry)
                self._region_knowledge.setdefault(provider.region, []).append(entry)

        logger.info(
            f"Knowledge registry loaded: {len(self._resources)} resources, "
            f"{len(self._knowledge)} knowledge entries across {len(providers)} providers"
        )

    # --- Location resolution ---

    @staticmethod
    def region_for_location(location: UKLocation) -> UKRegion:
        return region_for_location(location)

    @staticmethod
    def region_display_name(region: UKRegion) -> str:
        return REGION_DISPLAY_NAMES.get(region, str(region))

    def _accepted_locations(self, location: UKLocation) -> Set[UKLocation]:
        location = UKLocation(location)
        accepted = {location, UKLocation.UNKNOWN}
        region = region_for_location(location)
        if region != UKRegion.NATIONWIDE:
            accepted.update(locations_in_region(region))
        return accepted

    def _serves(self, locations: Iterable[UKLocation], accepted: Set[UKLocation]) -> bool:
        return any(loc in accepted for loc in locations)

    # --- Queries ---

    def query_resources(
        self,
        stage: JourneyStage,
        location: UKLocation,
        urgency: Optional[UrgencyLevel] = None,
        category: Optional[str] = None,
    ) -> List[Resource]:
        """Resources serving `stage` at `location`, ranked."""
        accepted = self._accepted_locations(location)
        needle = category.lower() if category else None

        results = []
        for resource in self._resources:
            if stage not in resource.journey_stages:
                continue
            if not self._serves(resource.locations, accepted):
                continue
            if urgency == UrgencyLevel.EMERGENCY and not resource.emergency:
                continue
            if needle and needle not in resource.category.lower():
                continue
            results.append(resource)

        logger.debug(
            f"query_resources stage={JourneyStage(stage).value} location={UKLocation(location).value} "
            f"urgency={urgency} category={category}: {len(results)} matches"
        )
        return rank_resources(results)

    def query_knowledge(
        self,
        topic: Optional[str],
        stage: JourneyStage,
        location: UKLocation,
    ) -> List[KnowledgeEntry]:
        """
        Knowledge entries for `stage` at `location` whose category or any tag
        contains `topic` (case-insensitive). A None topic matches everything.
        """
        accepted = self._accepted_locations(location)
        needle = topic.lower() if topic else None

        results = []
        for entry in self._knowledge:
            if stage not in entry.journey_stages:
                continue
            if not self._serves(entry.locations, accepted):
                continue
            if needle and not _topic_matches(entry, needle):
                continue
            results.append(entry)
        return rank_knowledge(results)

    def emergency_resources(self, location: UKLocation) -> List[Resource]:
        """Emergency resources for `location` regardless of stage, 24/7 services first."""
        accepted = self._accepted_locations(location)
        matches = [
            r for r in self._resources
            if r.emergency and self._serves(r.locations, accepted)
        ]
        ranked = rank_resources(matches)
        return sorted(ranked, key=lambda r: not _is_round_the_clock(r))

    def culturally_specific_resources(
        self, stage: JourneyStage, location: UKLocation
    ) -> List[Resource]:
        return [r for r in self.query_resources(stage, location) if r.culturally_specific]

    def health_knowledge(
        self,
        query: str,
        stage: JourneyStage,
        location: Optional[UKLocation] = None,
    ) -> List[KnowledgeEntry]:
        """
        Clinically-sourced knowledge for health questions.

        Returns entries citing the health platform whose title, content or tags
        mention one of the query's health keywords. Empty for non-health queries.
        With a `location`, entries are also restricted to ones serving it.
        """
        text = (query or "").lower()
        keywords = [k for k in HEALTH_KEYWORDS if _HEALTH_PATTERNS[k].search(text)]
        if not keywords:
            return []

        accepted = self._accepted_locations(location) if location is not None else None

        results = []
        for entry in self._knowledge:
            if stage not in entry.journey_stages:
                continue
            if accepted is not None and not self._serves(entry.locations, accepted):
                continue
            if not any(HEALTH_SOURCE in source.lower() for source in entry.sources):
                continue
            haystack = " ".join((entry.title, entry.content, *entry.tags)).lower()
            if any(_HEALTH_PATTERNS[k].search(haystack) for k in keywords):
                results.append(entry)
        return rank_knowledge(results)

    # --- Lookups ---

    def resources_by_region(self, region: UKRegion) -> List[Resource]:
        return list(self._region_resources.get(UKRegion(region), []))

    def knowledge_by_region(self, region: UKRegion) -> List[KnowledgeEntry]:
        return list(self._region_knowledge.get(UKRegion(region), []))

    def available_regions(self) -> List[UKRegion]:
        return [region for region in UKRegion if region in self._region_resources]

    def get_resource(self, resource_id: str) -> Optional[Resource]:
        return self._resources_by_id.get(resource_id)

    def get_knowledge(self, entry_id: str) -> Optional[KnowledgeEntry]:
        return self._knowledge_by_id.get(entry_id)

    @property
    def resource_count(self) -> int:
        return len(self._resources)

    @property
    def knowledge_count(self) -> int:
        return len(self._knowledge)


def _topic_matches(entry: KnowledgeEntry, needle: str) -> bool:
    if needle in entry.category.lower():
        return True
    return any(needle in tag.lower() for tag in entry.tags)
