"""Wales resources (Cardiff)."""

from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, Resource

RESOURCES = (
    Resource(
        id="umbrella-cymru",
        title="Umbrella Cymru",
        description="Gender and sexual identity support services across Wales",
        category="Community Support",
        journey_stages=("stabilization", "growth", "community_healing"),
        phone="0300 302 3670",
        website="https://www.umbrellacymru.co.uk",
        locations=("cardiff",),
        specializations=("one-to-one support", "trans support", "training"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        languages=("English", "Welsh"),
    ),
    Resource(
        id="fastrack-cardiff",
        title="Fast Track Cardiff & Vale",
        description="HIV testing and awareness with a focus on communities most affected",
        category="Sexual Health",
        journey_stages=("crisis", "stabilization", "growth"),
        website="https://fasttrackcardiff.org",
        locations=("cardiff",),
        specializations=("HIV testing", "PrEP awareness"),
        cost="nhs_funded",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, black_specific=True),
        languages=("English", "Welsh"),
    ),
)

PROVIDER = RegionalProvider(UKRegion.WALES, RESOURCES, ())
