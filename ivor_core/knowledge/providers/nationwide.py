"""UK-wide resources: crisis lines, NHS services and national charities."""

from datetime import datetime, timezone

from ivor_core.knowledge.providers.base import LAST_REVIEWED, RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, KnowledgeEntry, Resource

RESOURCES = (
    # Crisis lines
    Resource(
        id="samaritans",
        title="Samaritans",
        description="24/7 emotional support for anyone in crisis",
        category="Crisis Support",
        journey_stages=("crisis",),
        phone="116 123",
        website="https://samaritans.org",
        locations=("unknown",),
        specializations=("suicide prevention", "crisis support", "emotional support"),
        cost="free",
        cultural_competency=CulturalCompetency(disability_aware=True),
        emergency=True,
        availability="24/7",
        languages=("English", "Welsh"),
    ),
    Resource(
        id="shout-text-line",
        title="Shout 85258",
        description="Free, confidential 24/7 text support for anyone struggling to cope",
        category="Crisis Support",
        journey_stages=("crisis",),
        phone="Text SHOUT to 85258",
        website="https://giveusashout.org",
        locations=("unknown",),
        specializations=("text support", "crisis support", "suicide prevention"),
        cost="free",
        cultural_competency=CulturalCompetency(disability_aware=True),
        emergency=True,
        availability="24/7",
    ),
    Resource(
        id="lgbt-switchboard",
        title="LGBT+ Switchboard",
        description="Support and information for LGBT+ people",
        category="LGBTQ+ Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0300 330 0630",
        website="https://switchboard.lgbt",
        locations=("unknown",),
        specializations=("LGBT+ support", "information", "referrals"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, trans_specific=True, disability_aware=True,
        ),
        availability="10am-10pm daily",
    ),
    # NHS mental health
    Resource(
        id="nhs-talking-therapies",
        title="NHS Talking Therapies",
        description="Free NHS therapy for anxiety and depression - self-referral available",
        category="Mental Health",
        journey_stages=("stabilization", "growth"),
        website="https://www.nhs.uk/service-search/find-a-psychological-therapies-service/",
        locations=("unknown",),
        specializations=("anxiety", "depression", "PTSD", "therapy"),
        access_requirements=("NHS registration", "GP referral or self-referral"),
        cost="nhs_funded",
        cultural_competency=CulturalCompetency(disability_aware=True),
        availability="weekdays 9-5",
        languages=("English", "interpreters available"),
    ),
    Resource(
        id="black-minds-matter",
        title="Black Minds Matter UK",
        description=(
            "Free 1-to-1 talking therapy with qualified, accredited Black therapists "
            "for Black individuals and families."
        ),
        category="Mental Health",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        website="https://www.blackmindsmatteruk.com",
        locations=("unknown",),
        specializations=("talking therapy", "Black therapists", "culturally appropriate care"),
        access_requirements=("Black individuals and families",),
        cost="free",
        cultural_competency=CulturalCompetency(black_specific=True),
        availability="Online referral form, waitlist-based matching to therapist",
    ),
    # Sexual health
    Resource(
        id="menrus-platform",
        title="menrus.co.uk",
        description="Comprehensive sexual health platform for Black queer men",
        category="Sexual Health",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        website="https://menrus.co.uk",
        locations=("unknown",),
        specializations=("HIV", "PrEP", "PEP", "sexual health", "Black gay men"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, black_specific=True),
        availability="24/7 online",
    ),
    # Housing
    Resource(
        id="shelter-housing",
        title="Shelter",
        description="Emergency housing advice and support",
        category="Housing",
        journey_stages=("crisis", "stabilization"),
        phone="0808 800 4444",
        website="https://shelter.org.uk",
        locations=("unknown",),
        specializations=("housing", "eviction", "homelessness", "legal advice"),
        cost="free",
        cultural_competency=CulturalCompetency(disability_aware=True),
        emergency=True,
        availability="8am-8pm weekdays, 8am-5pm weekends",
        languages=("English", "Welsh"),
    ),
    Resource(
        id="stonewall-housing",
        title="Stonewall Housing",
        description="National LGBTQ+ housing charity providing specialist housing advice, advocacy and support.",
        category="Housing Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0800 6 404 404",
        email="info@stonewallhousing.org",
        website="https://stonewallhousing.org",
        locations=("london", "unknown"),
        specializations=("housing advice", "domestic abuse", "advocacy"),
        access_requirements=("LGBTQ+ identifying", "experiencing housing issues or homelessness risk"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True, disability_aware=True,
        ),
        availability="Helpline Mon-Fri 10am-1pm, national coverage",
    ),
    Resource(
        id="akt-youth-housing",
        title="akt (Albert Kennedy Trust)",
        description="National LGBTQ+ youth homelessness charity supporting young people aged 16-25.",
        category="Youth Housing",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="020 7831 6562",
        email="contact@akt.org.uk",
        website="https://www.akt.org.uk",
        locations=("london", "manchester", "bristol", "other_urban", "unknown"),
        specializations=("youth homelessness", "emergency accommodation", "mentoring"),
        access_requirements=("age 16-25", "LGBTQ+ identifying"),
        cost="free",
        cultural_competency=CulturalCompetency(
            lgbtq_specific=True, black_specific=True, trans_specific=True, disability_aware=True,
        ),
        emergency=True,
        availability="online chat and phone support, offices in 4 cities",
    ),
    # Legal
    Resource(
        id="galop",
        title="Galop",
        description="LGBT+ anti-abuse charity supporting victims of hate crime, domestic abuse and sexual violence",
        category="Legal & Safety",
        journey_stages=("crisis", "stabilization", "advocacy"),
        phone="0800 999 5428",
        website="https://galop.org.uk",
        locations=("unknown",),
        specializations=("hate crime", "domestic abuse", "sexual violence", "legal rights"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        emergency=True,
        availability="Helpline Mon-Fri 10am-5pm",
    ),
    Resource(
        id="equality-advisory-support",
        title="Equality Advisory and Support Service",
        description="Advice and assistance on discrimination and human rights issues",
        category="Legal Rights",
        journey_stages=("stabilization", "growth", "advocacy"),
        phone="0808 800 0082",
        website="https://www.equalityadvisoryservice.com",
        locations=("unknown",),
        specializations=("Equality Act", "discrimination", "employment rights"),
        cost="free",
        cultural_competency=CulturalCompetency(disability_aware=True),
        availability="Mon-Fri 9am-7pm, Sat 10am-2pm",
    ),
    Resource(
        id="private-counselling-directory",
        title="Pink Therapy Directory",
        description="Directory of gender and sexual diversity therapists, many offering reduced fees",
        category="Mental Health",
        journey_stages=("stabilization", "growth"),
        website="https://pinktherapy.com",
        locations=("unknown",),
        specializations=("LGBTQ+ affirming therapy", "counselling"),
        cost="sliding_scale",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        availability="Varies by therapist",
    ),
)

KNOWLEDGE = (
    KnowledgeEntry(
        id="hiv-treatment-uk",
        title="HIV Treatment in the UK",
        content=(
            "HIV treatment in the UK is free through the NHS and highly effective. Modern "
            "antiretroviral therapy (ART) can make HIV undetectable and untransmittable (U=U). "
            "Treatment is free regardless of immigration status, usually starts within two "
            "weeks of diagnosis, and is monitored every 3-6 months by specialist clinics."
        ),
        category="HIV Health",
        journey_stages=("crisis", "stabilization", "growth"),
        locations=("unknown",),
        tags=("HIV", "treatment", "NHS", "antiretroviral", "U=U", "sexual health"),
        sources=("NHS.uk", "menrus.co.uk", "Terrence Higgins Trust"),
        last_updated=datetime(2024, 1, 15, tzinfo=timezone.utc),
        verification_status="verified",
        community_validated=True,
    ),
    KnowledgeEntry(
        id="prep-access-uk",
        title="PrEP Access in the UK",
        content=(
            "Pre-exposure prophylaxis (PrEP) prevents HIV infection and is available free on "
            "the NHS in England, Wales, Scotland and Northern Ireland. Contact a local "
            "GUM/sexual health clinic; online booking is available in most areas and regular "
            "monitoring every 3 months is required."
        ),
        category="HIV Prevention",
        journey_stages=("growth", "stabilization"),
        locations=("unknown",),
        tags=("PrEP", "prevention", "NHS", "sexual health"),
        sources=("NHS.uk", "menrus.co.uk"),
        last_updated=datetime(2024, 2, 1, tzinfo=timezone.utc),
        verification_status="verified",
        community_validated=True,
    ),
    KnowledgeEntry(
        id="nhs-mental-health-access",
        title="Accessing NHS Mental Health Support",
        content=(
            "NHS Talking Therapies accept self-referrals for anxiety and depression. In a "
            "mental health crisis call NHS 111 and choose the mental health option, or 999 "
            "if life is at risk. GPs can refer to community mental health teams."
        ),
        category="Mental Health",
        journey_stages=("crisis", "stabilization", "growth"),
        locations=("unknown",),
        tags=("NHS", "mental health", "therapy", "talking therapies", "counselling"),
        sources=("NHS.uk", "Mind.org.uk"),
        last_updated=datetime(2024, 1, 20, tzinfo=timezone.utc),
        verification_status="verified",
        community_validated=True,
    ),
    KnowledgeEntry(
        id="uk-discrimination-law",
        title="Your Rights Under the Equality Act 2010",
        content=(
            "Sexual orientation, gender reassignment and race are protected characteristics. "
            "Discrimination at work, in housing or in services is unlawful. Employment "
            "tribunal claims must normally start with ACAS early conciliation within three "
            "months less one day of the incident."
        ),
        category="Legal Rights",
        journey_stages=("stabilization", "growth", "advocacy"),
        locations=("unknown",),
        tags=("discrimination", "legal rights", "legal", "employment", "Equality Act"),
        sources=("Gov.UK", "EHRC", "Stonewall"),
        last_updated=datetime(2024, 1, 10, tzinfo=timezone.utc),
        verification_status="verified",
        community_validated=True,
    ),
    KnowledgeEntry(
        id="lgbtq-youth-homelessness-support",
        title="LGBTQ+ Youth Homelessness Support",
        content=(
            "Young LGBTQ+ people are disproportionately affected by homelessness. akt offers "
            "mentoring, emergency accommodation routes and advice for 16-25 year olds. Local "
            "councils have a legal duty to help anyone at risk of homelessness within 56 days."
        ),
        category="Housing Crisis",
        journey_stages=("crisis", "stabilization", "growth"),
        locations=("unknown",),
        tags=("youth homelessness", "LGBTQ+ youth", "housing", "akt", "emergency accommodation"),
        sources=("akt.org.uk", "Stonewall Housing Research"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
    KnowledgeEntry(
        id="black-specific-mental-health-support",
        title="Culturally Appropriate Mental Health Support for Black People",
        content=(
            "Black Minds Matter UK connects Black individuals and families with accredited "
            "Black therapists at no cost. Culturally competent care reduces drop-out and "
            "improves outcomes; ask NHS services about therapist matching."
        ),
        category="Mental Health",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        locations=("unknown",),
        tags=("mental health", "Black Minds Matter", "therapy", "Black therapists"),
        sources=("blackmindsmatteruk.com", "Mind", "Mental Health Foundation"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
    KnowledgeEntry(
        id="community-organising-uk",
        title="Getting Involved in Black Queer Organising",
        content=(
            "UK Black Pride, local QTIPOC collectives and mutual aid networks welcome "
            "volunteers. Start by joining a campaign working group, attending a community "
            "meeting, or supporting a petition on issues such as asylum rights or NHS access."
        ),
        category="Community Organising",
        journey_stages=("community_healing", "advocacy"),
        locations=("unknown",),
        tags=("advocacy", "community", "volunteering", "campaigns", "mutual aid"),
        sources=("ukblackpride.org.uk", "BLKOUT"),
        last_updated=LAST_REVIEWED,
        verification_status="pending",
    ),
)

PROVIDER = RegionalProvider(UKRegion.NATIONWIDE, RESOURCES, KNOWLEDGE)
