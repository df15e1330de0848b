"""Scotland resources (Glasgow)."""

from ivor_core.knowledge.providers.base import LAST_REVIEWED, RegionalProvider
from ivor_core.models.location import UKRegion
from ivor_core.models.resources import CulturalCompetency, KnowledgeEntry, Resource

RESOURCES = (
    Resource(
        id="lgbt-health-wellbeing-scotland",
        title="LGBT Health and Wellbeing",
        description="Helpline, counselling and community programmes across Scotland",
        category="Health & Wellbeing",
        journey_stages=("crisis", "stabilization", "growth", "community_healing"),
        phone="0300 123 2523",
        website="https://www.lgbthealth.org.uk",
        locations=("glasgow",),
        specializations=("helpline", "counselling", "trans support"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
        availability="Tue and Wed 12pm-9pm",
    ),
    Resource(
        id="waverley-care",
        title="Waverley Care",
        description="Scotland's HIV and hepatitis C charity, including support for African communities",
        category="HIV Support",
        journey_stages=("crisis", "stabilization", "growth"),
        phone="0131 558 1425",
        website="https://www.waverleycare.org",
        locations=("glasgow",),
        specializations=("HIV", "African communities", "testing"),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, black_specific=True),
    ),
    Resource(
        id="lgbt-youth-scotland",
        title="LGBT Youth Scotland",
        description="Youth groups, online support and advocacy for young LGBTI people",
        category="Youth Support",
        journey_stages=("stabilization", "growth", "community_healing", "advocacy"),
        website="https://www.lgbtyouth.org.uk",
        locations=("glasgow",),
        specializations=("young people", "online support", "advocacy"),
        access_requirements=("aged 13-25",),
        cost="free",
        cultural_competency=CulturalCompetency(lgbtq_specific=True, trans_specific=True),
    ),
)

KNOWLEDGE = (
    KnowledgeEntry(
        id="scotland-hiv-support",
        title="HIV Support in Scotland",
        content=(
            "NHS Scotland provides free HIV treatment and PrEP through sexual health "
            "clinics. Waverley Care offers peer support, including projects for African "
            "communities in Glasgow."
        ),
        category="Sexual Health",
        journey_stages=("crisis", "stabilization", "growth"),
        locations=("glasgow",),
        tags=("HIV", "PrEP", "Scotland", "sexual health"),
        sources=("waverleycare.org", "nhsinform.scot"),
        last_updated=LAST_REVIEWED,
        verification_status="verified",
    ),
)

PROVIDER = RegionalProvider(UKRegion.SCOTLAND, RESOURCES, KNOWLEDGE)
