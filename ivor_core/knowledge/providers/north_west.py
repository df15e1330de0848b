"""North West England resources (Manchester, Liverpool)."""

from ivor_core.knowledge.providers.base import LAST_REVIEWED, RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, KnowledgeEntry, Resource

RESOURCES = (
    Resource(
        id="lgbt-foundation",
        title="LGBT Foundation",
        description="Health, wellbeing and sexual health services, talking therapies and helpline",
        category="Health & Wellbeing",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="0345 3 30 30 30",
        website="https://lgbt.foundation",
        locations=("manchester", "liverpool", "unknown"),
        specializations=("sexual health", "talking therapies", "trans support", "QTIPOC groups"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True,
        ),
        availability="Helpline available, office at 72 Sackville Street Manchester, services in Liverpool",
    ),
    Resource(
        id="africa-rainbow-family-manchester",
        title="African Rainbow Family - Manchester",
        description="Supporting LGBTIQ+ people of African heritage and refugees/asylum seekers.",
        category="African LGBTQ+ Support",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="07711285567",
        website="https://africanrainbowfamily.org",
        locations=("manchester",),
        specializations=("asylum seeker support", "peer support", "advocacy"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True,
        ),
        availability="Office at The Monastery, 89 Gorton Lane, Manchester",
    ),
    Resource(
        id="terrence-higgins-trust-manchester",
        title="Terrence Higgins Trust - Manchester",
        description="HIV and sexual health charity services in Manchester",
        category="HIV Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0808 802 1221",
        website="https://tht.org.uk",
        locations=("manchester",),
        specializations=("HIV", "sexual health", "testing"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
        availability="Mon-Fri 10am-8pm",
    ),
    Resource(
        id="manchester-sexual-health-hub",
        title="The Northern Sexual Health",
        description="NHS sexual health service for Manchester offering testing, PrEP and contraception",
        category="Sexual Health",
        journey_stages=("stabilization", "growth"),
        phone="0161 701 1555",
        website="https://www.thenorthernsexualhealth.co.uk",
        locations=("manchester",),
        specializations=("PrEP", "STI testing", "HIV testing"),
        cost="nhs_funded",
        cultural_competency=CulturalCompetency(lgbtq_specific=True),
        availability="Clinic hours vary, online booking available",
    ),
    Resource(
        id="tonic-housing-manchester",
        title="Tonic Housing - Manchester",
        description="LGBTQ+ affirming retirement housing expanding to Manchester",
        category="Older Adults Housing",
        journey_stages=("growth", "community_healing"),
        phone="0207 971 1091",
        website="https://www.tonichousing.org.uk",
        locations=("manchester",),
        cost="paid",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        availability="Expanding from London to Manchester",
    ),
)

KNOWLEDGE = (
    KnowledgeEntry(
        id="lgbt-foundation-manchester",
        title="LGBT Foundation Manchester - Health and Support Services",
        content=(
            "LGBT Foundation runs free sexual health testing, PrEP support, talking "
            "therapies, trans support and QTIPOC groups from Sackville Street, with a "
            "national helpline on 0345 3 30 30 30."
        ),
        category="Health Services",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        locations=("manchester", "liverpool", "unknown"),
        tags=("LGBT Foundation", "Manchester", "sexual health", "PrEP", "mental health", "QTIPOC"),
        sources=("lgbt.foundation", "Manchester Pride"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
    KnowledgeEntry(
        id="manchester-qtipoc-ecosystem",
        title="Manchester QTIPOC Community Ecosystem",
        content=(
            "Rainbow Noir, African Rainbow Family and LGBT Foundation's QTIPOC groups form "
            "a network of peer-led spaces for queer and trans people of colour across "
            "Greater Manchester."
        ),
        category="Community Support",
        journey_stages=("growth", "community_healing"),
        locations=("manchester",),
        tags=("QTIPOC", "Manchester", "community", "Rainbow Noir", "African Rainbow Family"),
        sources=("lgbt.foundation", "africanrainbowfamily.org", "Manchester Pride"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
)

PROVIDER = RegionalProvider(UKRegion.NORTH_WEST, RESOURCES, KNOWLEDGE)
