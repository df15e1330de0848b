"""
Regional provider — one static block of resources and knowledge per UK region.

Provider modules declare module-level constant tuples and wrap them in a
RegionalProvider. The registry aggregates every provider once at start-up.
"""

from datetime import datetime, timezone
from typing import Tuple

from ivor_core.models.location import UKRegion
from ivor_core.models.resources import KnowledgeEntry, Resource

# Date of the last community review pass over the regional tables.
LAST_REVIEWED = datetime(2025, 1, 15, tzinfo=timezone.utc)


class RegionalProvider:
    """Immutable resource/knowledge tables for one region."""

    def __init__(
        self,
        region: UKRegion,
        resources: Tuple[Resource, ...],
        knowledge: Tuple[KnowledgeEntry, ...],
    ):
        self.region = region
        self._resources = tuple(resources)
        self._knowledge = tuple(knowledge)

    @property
    def resources(self) -> Tuple[Resource, ...]:
        return self._resources

    @property
    def knowledge(self) -> Tuple[KnowledgeEntry, ...]:
        return self._knowledge

    def __repr__(self) -> str:
        return (
            f"RegionalProvider(region={self.region.value}, "
            f"resources={len(self._resources)}, knowledge={len(self._knowledge)})"
        )
