"""East Midlands resources (Nottingham, Leicester)."""

from ivor_core.knowledge.providers.base import RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, Resource

RESOURCES = (
    Resource(
        id="nottingham-lgbt-network",
        title="Nottingham LGBT+ Network",
        description="Helpline, befriending and social groups for LGBT+ people in Nottingham",
        category="Community Support",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="0115 934 8485",
        website="https://www.nottinghamlgbtnetwork.org.uk",
        locations=("nottingham",),
        specializations=("helpline", "befriending", "social groups"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, disability_aware=True),
        availability="Mon-Fri 7pm-9pm",
    ),
    Resource(
        id="leicester-lgbt-centre",
        title="Leicester LGBT Centre",
        description="Counselling, youth work and community groups for LGBT people in Leicestershire",
        category="Community Centre",
        journey_stages=("stabilization", "growth", "community_healing"),
        phone="0116 254 7412",
        website="https://www.leicesterlgbtcentre.org",
        locations=("other_urban", "nottingham"),
        specializations=("counselling", "youth work", "QTIPOC group"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True,
        ),
    ),
    Resource(
        id="nottingham-sexual-health",
        title="Nottingham Sexual Health Service",
        description="NHS clinic offering HIV and STI testing, PEP and PrEP",
        category="Sexual Health",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0115 962 7746",
        website="https://www.nuh.nhs.uk/sexual-health",
        locations=("nottingham",),
        specializations=("HIV testing", "PEP", "PrEP"),
        cost="nhs_funded",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
    ),
)

PROVIDER = RegionalProvider(UKRegion.EAST_MIDLANDS, RESOURCES, ())
