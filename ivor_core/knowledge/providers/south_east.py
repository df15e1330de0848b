"""South East England resources (Brighton)."""

from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, Resource

RESOURCES = (
    Resource(
        id="terrence-higgins-trust-brighton",
        title="Terrence Higgins Trust - Brighton",
        description="HIV and sexual health services in Brighton and Hove",
        category="HIV Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0808 802 1221",
        website="https://tht.org.uk",
        locations=("brighton",),
        specializations=("HIV", "sexual health", "testing"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
    ),
    Resource(
        id="switchboard-brighton",
        title="Switchboard Brighton",
        description="Listening service, counselling and community projects for LGBTQIA+ people",
        category="Mental Health",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="01273 204050",
        website="https://www.switchboard.org.uk",
        locations=("brighton",),
        specializations=("listening support", "counselling", "older LGBTQ+ people"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, trans_specific=True, disability_aware=True,
        ),
        availability="Daily 5pm-10pm",
    ),
    Resource(
        id="allsorts-youth",
        title="Allsorts Youth Project",
        description="Support for young people under 26 who are LGBT+ or unsure",
        category="Youth Support",
        journey_stages=("stabilization", "growth", "community_healing"),
        phone="01273 721211",
        website="https://www.allsortsyouth.org.uk",
        locations=("brighton",),
        specializations=("young people", "trans youth", "family support"),
        access_requirements=("aged under 26",),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
    ),
)

PROVIDER = RegionalProvider(UKRegion.SOUTH_EAST, RESOURCES, ())
