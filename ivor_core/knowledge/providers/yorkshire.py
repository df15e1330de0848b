"""Yorkshire and the Humber resources (Leeds, Sheffield)."""

from ivor_core.knowledge.providers.base import LAST_REVIEWED, RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, KnowledgeEntry, Resource

RESOURCES = (
    Resource(
        id="africa-rainbow-family-leeds",
        title="African Rainbow Family - Leeds",
        description="Peer support for LGBTIQ+ people of African heritage in Yorkshire",
        category="African LGBTQ+ Support",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="07711285567",
        website="https://africanrainbowfamily.org",
        locations=("leeds",),
        specializations=("asylum seeker support", "peer support"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, black_specific=True),
    ),
    Resource(
        id="leeds-lgbt-hub",
        title="Leeds LGBT+ Hub",
        description="Signposting, social groups and wellbeing support for LGBT+ people in Leeds",
        category="Community Centre",
        journey_stages=("stabilization", "growth", "community_healing"),
        website="https://www.leedslgbtplushub.org",
        locations=("leeds",),
        specializations=("social groups", "signposting", "wellbeing"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
    ),
    Resource(
        id="sayit-sheffield",
        title="SAYiT - Sheffield",
        description="Support for young LGBT+ people and sexual health education in Sheffield",
        category="Youth Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0114 241 2727",
        website="https://sayit.org.uk",
        locations=("sheffield",),
        specializations=("young people", "sexual health", "one-to-one support"),
        access_requirements=("aged 25 or under",),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        availability="Mon-Fri 10am-5pm",
    ),
)

KNOWLEDGE = (
    KnowledgeEntry(
        id="yorkshire-lgbtq-resources",
        title="LGBTQ+ Support Across Yorkshire",
        content=(
            "Leeds LGBT+ Hub signposts to local groups and services. SAYiT supports young "
            "LGBT+ people in Sheffield, and African Rainbow Family runs a Leeds group for "
            "LGBTIQ+ people of African heritage."
        ),
        category="Community Support",
        journey_stages=("stabilization", "growth", "community_healing"),
        locations=("leeds", "sheffield"),
        tags=("Yorkshire", "Leeds", "Sheffield", "community", "youth"),
        sources=("sayit.org.uk", "africanrainbowfamily.org"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
)

PROVIDER = RegionalProvider(UKRegion.YORKSHIRE, RESOURCES, KNOWLEDGE)
