"""South West England resources (Bristol)."""

from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, Resource

RESOURCES = (
    Resource(
        id="akt-bristol",
        title="akt - Bristol",
        description="Emergency housing support for LGBTQ+ young people aged 16-25",
        category="Youth Housing",
        journey_stages=("crisis", "stabilization"),
        phone="0117 942 6999",
        website="https://www.akt.org.uk",
        locations=("bristol",),
        specializations=("youth homelessness", "emergency accommodation"),
        access_requirements=("aged 16-25",),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        emergency=True,
    ),
    Resource(
        id="bristol-pride",
        title="Bristol Pride",
        description="Year-round LGBT+ events, film festival and community programme",
        category="Community Events",
        journey_stages=("growth", "community_healing", "advocacy"),
        website="https://bristolpride.co.uk",
        locations=("bristol",),
        specializations=("events", "community building"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
        availability="annual events and year-round activities",
    ),
    Resource(
        id="off-the-record-bristol",
        title="Off The Record Bristol",
        description="Mental health support for young people, including LGBTQ+ groups",
        category="Mental Health",
        journey_stages=("stabilization", "growth"),
        phone="0808 808 9120",
        website="https://otrbristol.org.uk",
        locations=("bristol",),
        specializations=("young people", "mental health", "peer groups"),
        access_requirements=("aged 11-25",),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
    ),
)

PROVIDER = RegionalProvider(UKRegion.SOUTH_WEST, RESOURCES, ())
