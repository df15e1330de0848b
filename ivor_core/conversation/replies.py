"""
Reply generation collaborators.

The orchestrator never writes the natural-language reply itself; it hands a
ReplyRequest to a ReplyGenerator. TemplateReplyGenerator is the offline
implementation used when no text-generation service is wired in.
"""

from typing import List, Protocol

from ivor_core.models.conversation import ReplyRequest
from ivor_core.models.journey import Formality, JourneyStage
from ivor_core.models.resources import CostTier, Resource

# Shown verbatim when the reply collaborator fails.
DEGRADED_MESSAGE = (
    "I'll be straight with you: I'm having technical difficulties and can't give you "
    "the personalised response I should.\n\n"
    "If this is urgent:\n"
    "- Emergency: 999 or your nearest A&E\n"
    "- Samaritans: 116 123 (free, 24/7)\n"
    "- Switchboard LGBT+: 0300 330 0630\n"
    "- Text SHOUT to 85258\n\n"
    "The resources listed with this message are still checked and relevant to you."
)


class ReplyGenerator(Protocol):
    async def generate(self, request: ReplyRequest) -> str:
        ...


STAGE_OPENINGS = {
    JourneyStage.CRISIS: (
        "I hear you. What you're going through matters, and you don't have to sit "
        "with it alone."
    ),
    JourneyStage.STABILIZATION: (
        "Stability isn't glamorous, but it's the foundation everything else gets "
        "built on. The fact you're here, working on it, says something."
    ),
    JourneyStage.GROWTH: "Right then, growth mode. This is where it gets interesting.",
    JourneyStage.COMMUNITY_HEALING: (
        "Healing together hits different. Finding people who get it can change everything."
    ),
    JourneyStage.ADVOCACY: (
        "Turning what you've lived through into change for others is powerful work."
    ),
}

STAGE_CLOSINGS = {
    JourneyStage.CRISIS: (
        "You are part of this community. What you're facing right now is not the whole "
        "of who you are."
    ),
    JourneyStage.STABILIZATION: (
        "Regular support makes a real difference. Not because it fixes everything "
        "overnight, but because it means you're not carrying it alone."
    ),
    JourneyStage.GROWTH: (
        "Personal growth and collective power aren't separate things."
    ),
    JourneyStage.COMMUNITY_HEALING: (
        "Your story and your presence matter to the people around you."
    ),
    JourneyStage.ADVOCACY: (
        "Look after yourself along the way. Sustainable organising outlasts burnout."
    ),
}

FORMAL_OPENING = "Thank you for getting in touch."


def _resource_line(resource: Resource) -> str:
    contact = resource.phone or resource.website or resource.email or ""
    line = f"- {resource.title}"
    if contact:
        line += f": {contact}"
    if resource.cost in (CostTier.FREE, CostTier.NHS_FUNDED):
        line += " (NHS funded)" if resource.cost == CostTier.NHS_FUNDED else " (free)"
    return line


class TemplateReplyGenerator:
    """Stage-aware templated reply. Deterministic and offline."""

    def __init__(self, max_listed_resources: int = 3, excerpt_length: int = 240):
        self.max_listed_resources = max_listed_resources
        self.excerpt_length = excerpt_length

    async def generate(self, request: ReplyRequest) -> str:
        parts: List[str] = []

        opening = STAGE_OPENINGS[request.stage]
        if request.formality == Formality.FORMAL:
            opening = f"{FORMAL_OPENING} {opening}"
        parts.append(opening)

        if request.resources:
            heading = (
                "Immediate support, right now:"
                if request.stage == JourneyStage.CRISIS
                else "Support worth knowing about:"
            )
            lines = [_resource_line(r) for r in request.resources[: self.max_listed_resources]]
            parts.append("\n".join([heading, *lines]))

        if request.knowledge:
            content = request.knowledge[0].content
            if len(content) > self.excerpt_length:
                content = content[: self.excerpt_length].rstrip() + "..."
            parts.append(content)

        parts.append(STAGE_CLOSINGS[request.stage])

        if request.next_stage_pathway:
            parts.append(request.next_stage_pathway)

        return "\n\n".join(parts)
