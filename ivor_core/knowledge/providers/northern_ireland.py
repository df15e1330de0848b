"""Northern Ireland resources (Belfast)."""

from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, Resource

RESOURCES = (
    Resource(
        id="rainbow-project-belfast",
        title="The Rainbow Project",
        description="Health and wellbeing services for LGBTQIA+ people in Northern Ireland",
        category="Health & Wellbeing",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="028 9031 9030",
        website="https://www.rainbow-project.org",
        locations=("belfast",),
        specializations=("counselling", "sexual health", "advocacy"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
    ),
    Resource(
        id="cara-friend-belfast",
        title="Cara-Friend",
        description="Switchboard and youth services for LGBTQ+ people across Northern Ireland",
        category="Youth Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0808 8000 390",
        website="https://cara-friend.org.uk",
        locations=("belfast",),
        specializations=("switchboard", "young people", "befriending"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
        emergency=True,
        availability="Mon-Fri 1pm-4pm",
    ),
)

PROVIDER = RegionalProvider(UKRegion.NORTHERN_IRELAND, RESOURCES, ())
