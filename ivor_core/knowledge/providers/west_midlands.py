"""West Midlands resources (Birmingham)."""

from ivor_core.knowledge.providers.base import LAST_REVIEWED, RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, KnowledgeEntry, Resource

RESOURCES = (
    Resource(
        id="unmuted-birmingham",
        title="Unmuted - Birmingham",
        description="Peer-led network for queer and trans people of colour in Birmingham",
        category="QTIPOC Community",
        journey_stages=("stabilization", "growth", "community_healing"),
        email="hello@unmuted.org.uk",
        website="https://unmuted.org.uk",
        locations=("birmingham",),
        specializations=("QTIPOC peer support", "socials", "creative workshops"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True,
        ),
        availability="Monthly meet-ups and online groups",
    ),
    Resource(
        id="africa-rainbow-family-birmingham",
        title="African Rainbow Family - Birmingham",
        description="Support for LGBTIQ+ people of African heritage and LGBTIQ+ asylum seekers",
        category="African LGBTQ+ Support",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="07711285567",
        website="https://africanrainbowfamily.org",
        locations=("birmingham",),
        specializations=("asylum seeker support", "peer support"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, black_specific=True),
        availability="Drop-in sessions, call ahead",
    ),
    Resource(
        id="terrence-higgins-trust-birmingham",
        title="Terrence Higgins Trust - Birmingham",
        description="HIV and sexual health support in the West Midlands",
        category="HIV Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0808 802 1221",
        website="https://tht.org.uk",
        locations=("birmingham",),
        specializations=("HIV", "sexual health", "testing"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
        availability="Mon-Fri 10am-8pm",
    ),
    Resource(
        id="birmingham-lgbt",
        title="Birmingham LGBT",
        description="Community centre with wellbeing services, counselling and sexual health clinics",
        category="Community Centre",
        journey_stages=("stabilization", "growth", "community_healing", "advocacy"),
        phone="0121 643 0821",
        website="https://blgbt.org",
        locations=("birmingham",),
        specializations=("counselling", "sexual health", "trans support", "community events"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, trans_specific=True, disability_aware=True,
        ),
        availability="Mon-Fri 9am-5pm",
    ),
)

KNOWLEDGE = (
    KnowledgeEntry(
        id="qtipoc-community-birmingham",
        title="QTIPOC Community in Birmingham",
        content=(
            "Unmuted and Birmingham LGBT host regular spaces for queer and trans people "
            "of colour, from peer support to creative workshops. Birmingham Pride has a "
            "dedicated QTIPOC stage each year."
        ),
        category="Community Support",
        journey_stages=("growth", "community_healing", "advocacy"),
        locations=("birmingham",),
        tags=("QTIPOC", "Birmingham", "community", "Unmuted"),
        sources=("unmuted.org.uk", "blgbt.org"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
)

PROVIDER = RegionalProvider(UKRegion.WEST_MIDLANDS, RESOURCES, KNOWLEDGE)
