"""Greater London resources."""

from ivor_core.knowledge.providers.base import LAST_REVIEWED, RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, KnowledgeEntry, Resource

RESOURCES = (
    Resource(
        id="terrence-higgins-trust-london",
        title="Terrence Higgins Trust - London",
        description="Leading HIV and sexual health charity with specialist support in London",
        category="HIV Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0808 802 1221",
        website="https://tht.org.uk",
        locations=("london",),
        specializations=("HIV", "sexual health", "testing", "support groups"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, disability_aware=True),
        availability="Mon-Fri 10am-8pm",
    ),
    Resource(
        id="56-dean-street",
        title="56 Dean Street",
        description="NHS sexual health clinic in Soho offering HIV testing, PEP, PrEP and same-day results",
        category="Sexual Health",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="020 3315 6699",
        website="https://www.dean.st",
        locations=("london",),
        specializations=("HIV testing", "PEP", "PrEP", "STI testing"),
        cost="nhs_funded",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        emergency=True,
        availability="Walk-in and booked clinics, check website for hours",
    ),
    Resource(
        id="black-trans-alliance",
        title="Black Trans Alliance",
        description=(
            "Black queer and trans-led nonprofit supporting Black trans and non-binary people "
            "through peer support, counselling, advocacy and safe spaces."
        ),
        category="Trans Support",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        email="admin@blacktransalliance.org",
        website="https://www.blacktransalliance.org",
        locations=("london", "unknown"),
        specializations=("Black trans support", "peer support", "trans counselling", "advocacy"),
        access_requirements=("trans, non-binary, or questioning identity",),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True,
        ),
        availability="Online peer support groups and one-to-one sessions, helpline available",
    ),
    Resource(
        id="rainbow-migration",
        title="Rainbow Migration",
        description="LGBTQI+ asylum and immigration support: free legal advice, emotional support and advocacy.",
        category="Asylum & Immigration",
        journey_stages=("crisis", "stabilization", "growth", "advocacy"),
        phone="0203 752 5801",
        email="hello@rainbowmigration.org.uk",
        website="https://www.rainbowmigration.org.uk",
        locations=("london", "unknown"),
        specializations=("LGBTQI+ asylum claims", "immigration legal advice", "anti-detention campaigns"),
        access_requirements=("LGBTQI+ identifying", "seeking asylum or immigration support"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True, disability_aware=True,
        ),
        emergency=True,
        availability="Email and phone support, office in London",
    ),
    Resource(
        id="out-and-proud-lgbti",
        title="Out and Proud African LGBTI (OPAL)",
        description="Grassroots organisation by and for LGBTIQ refugees and asylum seekers from Africa.",
        category="African LGBTQ+ Asylum",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="+44 7537 968154",
        email="info@africanlgbti.org",
        website="https://africanlgbti.org",
        locations=("london",),
        specializations=("peer support", "weekly socials", "legal workshops"),
        access_requirements=("LGBTIQ identifying", "African heritage", "asylum seeker or refugee status"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True,
        ),
        availability="Saturday socials 5-10pm, monthly asylum meetings",
    ),
    Resource(
        id="uk-black-pride",
        title="UK Black Pride",
        description=(
            "Community events and support for LGBTQ+ people of African, Asian, Caribbean, "
            "Middle Eastern and Latin American descent"
        ),
        category="Community Events",
        journey_stages=("growth", "community_healing", "advocacy"),
        website="https://ukblackpride.org.uk",
        locations=("london",),
        specializations=("community building", "events", "pride", "cultural celebration"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True, disability_aware=True,
        ),
        availability="annual events and year-round activities",
    ),
    Resource(
        id="london-lgbtq-centre",
        title="London LGBTQ+ Community Centre",
        description="Sober, intersectional community centre and cafe with wellbeing support and BPOC programming",
        category="Community Centre",
        journey_stages=("stabilization", "growth", "community_healing"),
        email="hello@londonlgbtqcentre.org",
        website="https://londonlgbtqcentre.org",
        locations=("london",),
        specializations=("mental health support", "older adults 50+", "BPOC community groups", "sober spaces"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True, disability_aware=True,
        ),
        availability="Wed-Sun 12pm-8pm",
    ),
    Resource(
        id="tonic-housing-london",
        title="Tonic Housing - London",
        description="LGBTQ+ affirming retirement housing provider",
        category="Older Adults Housing",
        journey_stages=("growth", "community_healing"),
        phone="0207 971 1091",
        email="info@tonichousing.org.uk",
        website="https://www.tonichousing.org.uk",
        locations=("london",),
        specializations=("LGBTQ+ retirement housing", "older adults 55+", "shared ownership"),
        access_requirements=("LGBTQ+ identifying", "older adult (typically 55+)"),
        cost="paid",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, trans_specific=True, disability_aware=True,
        ),
        availability="Tonic@Bankhouse in Vauxhall",
    ),
)

KNOWLEDGE = (
    KnowledgeEntry(
        id="black-trans-support-uk",
        title="Support for Black Trans and Non-Binary People in the UK",
        content=(
            "Black trans and non-binary people face compounded discrimination at the "
            "intersection of transphobia and racism. Black Trans Alliance offers free, "
            "confidential peer-to-peer support, trans counselling with identity-affirming "
            "therapists and help accessing gender-affirming care."
        ),
        category="Trans Support",
        journey_stages=("crisis", "stabilization", "growth", "community_healing", "advocacy"),
        locations=("london", "unknown"),
        tags=("trans", "non-binary", "Black trans", "gender identity", "Black Trans Alliance"),
        sources=("blacktransalliance.org", "Stonewall", "NHS", "Galop"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
    KnowledgeEntry(
        id="london-lgbtq-centre-community",
        title="Community Spaces and Support for LGBTQ+ BPOC in London",
        content=(
            "The London LGBTQ+ Community Centre in Blackfriars is a sober, intersectional "
            "space with programming for Black people and people of colour, including Melanin "
            "Vybz for LGBTQ+ BPOC over 50. No referral needed, just drop in."
        ),
        category="Community Support",
        journey_stages=("stabilization", "growth", "community_healing"),
        locations=("london",),
        tags=("community centre", "BPOC", "older adults", "mental health", "community"),
        sources=("londonlgbtqcentre.org", "Opening Doors London"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
    KnowledgeEntry(
        id="lgbtq-asylum-refugee-support-uk",
        title="LGBTQ+ Asylum and Refugee Support in the UK",
        content=(
            "Rainbow Migration gives free legal advice on asylum claims (0203 752 5801). "
            "OPAL runs peer support and monthly asylum meetings for African LGBTIQ people. "
            "If detained, contact Bail for Immigration Detainees."
        ),
        category="Asylum & Immigration",
        journey_stages=("crisis", "stabilization", "growth", "advocacy"),
        locations=("london",),
        tags=("asylum", "refugee", "immigration", "legal", "Rainbow Migration", "OPAL"),
        sources=("rainbowmigration.org.uk", "africanlgbti.org"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
    KnowledgeEntry(
        id="london-sexual-health-clinics",
        title="Sexual Health Clinics in London",
        content=(
            "London sexual health clinics such as 56 Dean Street offer free HIV and STI "
            "testing, PEP within 72 hours of exposure, and NHS PrEP. Many clinics offer "
            "same-day results and online booking."
        ),
        category="Sexual Health",
        journey_stages=("crisis", "stabilization", "growth"),
        locations=("london",),
        tags=("sexual health", "HIV", "PEP", "PrEP", "testing"),
        sources=("https://www.dean.st", "NHS.uk", "menrus.co.uk"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
        community_validated=True,
    ),
)

PROVIDER = RegionalProvider(UKRegion.LONDON, RESOURCES, KNOWLEDGE)
