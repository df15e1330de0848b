"""North East England resources (Newcastle)."""

from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, Resource

RESOURCES = (
    Resource(
        id="akt-newcastle",
        title="akt - Newcastle",
        description="Housing support and mentoring for LGBTQ+ young people in the North East",
        category="Youth Housing",
        journey_stages=("crisis", "stabilization"),
        phone="0191 300 9898",
        website="https://www.akt.org.uk",
        locations=("other_urban",),
        specializations=("youth homelessness", "mentoring"),
        access_requirements=("aged 16-25",),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        emergency=True,
    ),
    Resource(
        id="northern-pride",
        title="Northern Pride",
        description="Pride festival and year-round community events in Newcastle",
        category="Community Events",
        journey_stages=("growth", "community_healing", "advocacy"),
        website="https://northern-pride.com",
        locations=("other_urban",),
        specializations=("events", "community building"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
    ),
    Resource(
        id="mesmac-north-east",
        title="MESMAC North East",
        description="Sexual health, HIV prevention and support for gay, bisexual and trans people",
        category="Sexual Health",
        journey_stages=("stabilization", "growth"),
        phone="0191 233 1333",
        website="https://mesmacnortheast.com",
        locations=("other_urban",),
        specializations=("HIV testing", "PrEP advice", "outreach"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
    ),
)

PROVIDER = RegionalProvider(UKRegion.NORTH_EAST, RESOURCES, ())
