"""
Resource / Knowledge Ranker.

Deterministic multi-criteria ordering. Both functions are stable sorts, so
items that tie on every criterion keep their registry order.
"""

from typing import Iterable, List

from ivor_core.models.resources import FREE_COST_TIERS, KnowledgeEntry, Resource


def _resource_key(resource: Resource):
    return (
        not resource.emergency,
        resource.cost not in FREE_COST_TIERS,
        not resource.culturally_specific,
    )


def rank_resources(resources: Iterable[Resource]) -> List[Resource]:
    """Emergency first, then free or NHS-funded, then culturally specific."""
    return sorted(resources, key=_resource_key)


def rank_knowledge(entries: Iterable[KnowledgeEntry]) -> List[KnowledgeEntry]:
    """Community-validated first, then most recently updated."""
    # Two passes keep the ordering stable: secondary key first.
    by_recency = sorted(entries, key=lambda e: e.last_updated, reverse=True)
    return sorted(by_recency, key=lambda e: not e.community_validated)
