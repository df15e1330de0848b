"""East of England resources."""

from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, Resource

RESOURCES = (
    Resource(
        id="kite-trust",
        title="The Kite Trust",
        description="Supporting LGBTQ+ young people across Cambridgeshire and Peterborough",
        category="Youth Support",
        journey_stages=("stabilization", "growth", "community_healing"),
        website="https://thekitetrust.org.uk",
        email="info@thekitetrust.org.uk",
        locations=("other_urban",),
        specializations=("young people", "youth groups", "training"),
        access_requirements=("aged 25 or under",),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
    ),
    Resource(
        id="norwich-pride",
        title="Norwich Pride",
        description="Community-run pride and year-round LGBT+ visibility in Norfolk",
        category="Community Events",
        journey_stages=("growth", "community_healing", "advocacy"),
        website="https://norwichpride.org.uk",
        locations=("other_urban",),
        specializations=("events", "community building", "campaigning"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
    ),
)

PROVIDER = RegionalProvider(UKRegion.EAST_ENGLAND, RESOURCES, ())
