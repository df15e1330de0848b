"""
Journey Stage Classifier — where is the user in their support journey?

Every stage owns an independent indicator set. A message is checked against
all of them and the stage is chosen by a fixed precedence rule list:

    crisis > stabilization > growth > community_healing > advocacy

Any crisis indicator therefore forces `crisis`, whatever else matched. A
message that matches nothing is classified `growth` and flagged ambiguous.

Tone signals (emotional state, formality), urgency, community connection and
access preference are computed from their own phrase sets and never feed back
into the stage decision.

Matching is on whole words/phrases over lower-cased text with apostrophes
removed and hyphens treated as spaces, so "can't cope" matches "cant cope"
and "now" does not match inside "know".
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from ivor_core.models.journey import (
    AccessPreference,
    CommunityConnectionLevel,
    EmotionalState,
    Formality,
    JourneyContext,
    JourneyStage,
    MemoryRecord,
    UrgencyLevel,
)
from ivor_core.models.location import UKLocation


STAGE_INDICATORS: Dict[JourneyStage, Tuple[str, ...]] = {
    JourneyStage.CRISIS: (
        "emergency", "urgent", "crisis", "need help now", "help me now", "desperate",
        "suicidal", "suicide", "self harm", "kill myself", "end it all", "want to die",
        "cant cope", "breaking down", "hospital", "police", "ambulance", "999",
        "danger", "unsafe", "threatened", "attacked", "assaulted", "abused",
        "diagnosed", "evicted", "kicked out", "homeless", "overdose", "overdosed",
        "terrified", "panicking", "hopeless", "trapped",
    ),
    JourneyStage.STABILIZATION: (
        "getting support", "finding resources", "need information", "looking for help",
        "therapist", "therapy", "counselling", "counseling", "counsellor", "medication",
        "treatment", "regular support", "ongoing support", "ongoing help",
        "housing support", "benefits", "social services", "gp", "recovery", "recovering",
        "stable", "routine", "feeling a bit better", "getting through each day",
    ),
    JourneyStage.GROWTH: (
        "want to learn", "learn more", "learn about", "how can i", "how do i",
        "planning to", "interested in", "developing", "improving", "skill building",
        "skills", "education", "career", "goals", "future", "next steps",
        "opportunities", "workshops", "training", "courses", "mentor", "coaching",
        "want to understand", "curious", "ambitious", "ready to grow",
    ),
    JourneyStage.COMMUNITY_HEALING: (
        "community support", "group therapy", "healing space", "peer support",
        "support group", "healing circle", "community healing", "collective",
        "together", "shared experience", "mentoring", "giving back", "healing trauma",
        "community care", "mutual aid", "belonging", "fellowship", "chosen family",
        "ready to connect", "finding community", "meet people like me",
    ),
    JourneyStage.ADVOCACY: (
        "want to help others", "organise", "organize", "organising", "organizing",
        "campaign", "campaigning", "activism", "activist", "advocacy", "advocate",
        "policy", "system change", "systemic change", "justice", "injustice", "rights",
        "inequality", "reform", "movement", "protest", "petition", "lobby",
        "mobilise", "mobilize", "coalition", "volunteer", "volunteering",
    ),
}

# Resolution order. Safety first: crisis is never overridden.
STAGE_PRECEDENCE: Tuple[JourneyStage, ...] = (
    JourneyStage.CRISIS,
    JourneyStage.STABILIZATION,
    JourneyStage.GROWTH,
    JourneyStage.COMMUNITY_HEALING,
    JourneyStage.ADVOCACY,
)

EMERGENCY_WORDS = (
    "emergency", "suicide", "suicidal", "kill myself", "end it all", "overdose",
    "999", "ambulance", "urgent",
)
HIGH_URGENCY_WORDS = ("asap", "immediately", "right now", "today", "tonight")
MEDIUM_URGENCY_WORDS = ("soon", "this week", "within days", "quickly")

# Checked in order; first match wins.
EMOTION_INDICATORS: Tuple[Tuple[EmotionalState, Tuple[str, ...]], ...] = (
    (EmotionalState.OVERWHELMED, (
        "overwhelmed", "terrified", "scared", "panicking", "panic", "cant cope",
        "hopeless", "desperate", "breaking down", "suicidal",
    )),
    (EmotionalState.STRESSED, (
        "stressed", "anxious", "worried", "nervous", "under pressure", "struggling",
    )),
    (EmotionalState.UNCERTAIN, (
        "unsure", "confused", "lost", "dont know", "uncertain", "not sure",
    )),
    (EmotionalState.EXCITED, (
        "excited", "motivated", "determined", "hopeful", "cant wait", "eager",
    )),
    (EmotionalState.JOYFUL, (
        "happy", "joy", "joyful", "celebrate", "celebrating", "amazing", "wonderful",
        "fantastic", "grateful",
    )),
)

FORMAL_PHRASES = (
    "could you please", "would you", "i would like", "i would appreciate", "kindly",
    "dear", "regards", "thank you", "furthermore", "assistance", "i am writing",
    "please advise", "sincerely",
)
CASUAL_PHRASES = (
    "hey", "hi", "hiya", "yo", "gonna", "wanna", "kinda", "lol", "tbh", "mate",
    "babe", "innit", "cheers", "yeah", "nah", "omg", "cos", "dunno",
)

CONNECTION_INDICATORS: Tuple[Tuple[CommunityConnectionLevel, Tuple[str, ...]], ...] = (
    (CommunityConnectionLevel.ORGANIZING, (
        "organizing", "organising", "leading", "campaign", "campaigning", "activist", "advocate",
    )),
    (CommunityConnectionLevel.ISOLATED, (
        "alone", "isolated", "no one", "nobody", "by myself", "no friends", "lonely",
    )),
    (CommunityConnectionLevel.CONNECTED, (
        "some friends", "few people", "getting involved", "meeting people",
    )),
    (CommunityConnectionLevel.NETWORKED, (
        "my community", "friends", "network", "support group", "involved",
    )),
    (CommunityConnectionLevel.EXPLORING, (
        "looking for", "want to meet", "finding community", "new here",
    )),
)

ACCESS_INDICATORS: Tuple[Tuple[AccessPreference, Tuple[str, ...]], ...] = (
    (AccessPreference.PHONE, ("call", "phone", "talk to someone", "speak to", "ring")),
    (AccessPreference.ONLINE, ("online", "website", "digital", "app", "chat", "email")),
    (AccessPreference.IN_PERSON, ("in person", "face to face", "meet", "visit", "go to", "drop in")),
)

TOPIC_INDICATORS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("sexual health", (
        "hiv", "prep", "pep", "sexual health", "sti", "stis", "testing", "treatment",
        "diagnosis", "diagnosed",
    )),
    ("mental health", (
        "therapy", "therapist", "counselling", "depression", "anxiety", "mental health",
        "suicidal",
    )),
    ("housing", ("evicted", "housing", "homeless", "rent", "landlord", "accommodation")),
    ("legal", ("discrimination", "rights", "legal", "employment", "tribunal", "harassment")),
    ("community", ("community", "group", "events", "pride", "support group", "peers")),
)

NEXT_STAGE_GUIDANCE: Dict[JourneyStage, str] = {
    JourneyStage.CRISIS: (
        "Next: Stabilisation. Building ongoing safety, regular support, and space to "
        "process at your own pace. You don't have to do this alone."
    ),
    JourneyStage.STABILIZATION: (
        "Next: Growth. As stability strengthens, personal development, skill building "
        "and new opportunities open up. No rush, you'll know when you're ready."
    ),
    JourneyStage.GROWTH: (
        "Next: Community Healing. Connecting your personal growth with community spaces, "
        "sharing your journey, and supporting others through theirs."
    ),
    JourneyStage.COMMUNITY_HEALING: (
        "Next: Advocacy. Using your healing journey and community connections to work "
        "for systemic change and liberation for all Black queer people."
    ),
    JourneyStage.ADVOCACY: (
        "Full-Circle Liberation. Advocacy often deepens everything that came before: "
        "continued healing, growth, community connection, and supporting others "
        "through their journeys."
    ),
}


def normalize_text(text: str) -> str:
    lowered = (text or "").lower()
    lowered = lowered.replace("'", "").replace("’", "")
    lowered = lowered.replace("-", " ")
    return " ".join(lowered.split())


def _compile(phrases: Iterable[str]) -> List[Tuple[str, "re.Pattern"]]:
    return [
        (phrase, re.compile(r"(?<![a-z0-9])" + re.escape(phrase) + r"(?![a-z0-9])"))
        for phrase in phrases
    ]


def _matches(text: str, compiled: Sequence[Tuple[str, "re.Pattern"]]) -> List[str]:
    return [phrase for phrase, pattern in compiled if pattern.search(text)]


class Classification(BaseModel):
    """Outcome of classifying one message."""

    context: JourneyContext
    matched_indicators: Dict[JourneyStage, List[str]] = {}
    ambiguous: bool = False                 # No stage indicator matched; defaulted to growth
    next_stage_pathway: Optional[str] = None

    @property
    def stage(self) -> JourneyStage:
        return self.context.stage


class JourneyStageClassifier:
    """
    Maps free text (plus optional history and memories) to a JourneyContext.

    Pure and deterministic: the same input always produces the same output.
    """

    def __init__(self):
        self._stage_patterns = {
            stage: _compile(phrases) for stage, phrases in STAGE_INDICATORS.items()
        }
        self._emergency = _compile(EMERGENCY_WORDS)
        self._high = _compile(HIGH_URGENCY_WORDS)
        self._medium = _compile(MEDIUM_URGENCY_WORDS)
        self._emotions = [(state, _compile(p)) for state, p in EMOTION_INDICATORS]
        self._formal = _compile(FORMAL_PHRASES)
        self._casual = _compile(CASUAL_PHRASES)
        self._connection = [(level, _compile(p)) for level, p in CONNECTION_INDICATORS]
        self._access = [(pref, _compile(p)) for pref, p in ACCESS_INDICATORS]
        self._topics = [(topic, _compile(p)) for topic, p in TOPIC_INDICATORS]

    def classify(
        self,
        text: str,
        previous_stages: Sequence[JourneyStage] = (),
        location: UKLocation = UKLocation.UNKNOWN,
        memories: Sequence[MemoryRecord] = (),
    ) -> Classification:
        normalized = normalize_text(text)
        previous = [JourneyStage(s) for s in previous_stages]

        matched: Dict[JourneyStage, List[str]] = {}
        for stage, patterns in self._stage_patterns.items():
            hits = _matches(normalized, patterns)
            if hits:
                matched[stage] = hits

        stage, ambiguous = self._resolve_stage(matched)

        context = JourneyContext(
            stage=stage,
            emotional_state=self.detect_emotional_state(normalized),
            urgency_level=self.detect_urgency(normalized, stage),
            formality=self.detect_formality(normalized, memories),
            location=location,
            community_connection=self.detect_community_connection(normalized),
            first_time=len(previous) == 0,
            returning_user=len(previous) > 0,
            previous_stages=previous,
            resource_access_preference=self.detect_access_preference(normalized),
        )

        return Classification(
            context=context,
            matched_indicators=matched,
            ambiguous=ambiguous,
            next_stage_pathway=self.next_stage_pathway(stage, previous),
        )

    def _resolve_stage(self, matched: Dict[JourneyStage, List[str]]) -> Tuple[JourneyStage, bool]:
        for stage in STAGE_PRECEDENCE:
            if matched.get(stage):
                return stage, False
        return JourneyStage.GROWTH, True

    # --- Independent signals ---

    def detect_urgency(self, text: str, stage: JourneyStage) -> UrgencyLevel:
        text = normalize_text(text)
        if _matches(text, self._emergency):
            return UrgencyLevel.EMERGENCY
        if stage == JourneyStage.CRISIS:
            return UrgencyLevel.HIGH
        if _matches(text, self._high):
            return UrgencyLevel.HIGH
        if _matches(text, self._medium):
            return UrgencyLevel.MEDIUM
        return UrgencyLevel.LOW

    def detect_emotional_state(self, text: str) -> EmotionalState:
        text = normalize_text(text)
        for state, patterns in self._emotions:
            if _matches(text, patterns):
                return state
        return EmotionalState.CALM

    def detect_formality(self, text: str, memories: Sequence[MemoryRecord] = ()) -> Formality:
        text = normalize_text(text)
        formal = bool(_matches(text, self._formal))
        casual = bool(_matches(text, self._casual))
        if formal and casual:
            return Formality.MIXED
        if formal:
            return Formality.FORMAL
        if casual:
            return Formality.CASUAL
        return _remembered_formality(memories)

    def detect_community_connection(self, text: str) -> CommunityConnectionLevel:
        text = normalize_text(text)
        for level, patterns in self._connection:
            if _matches(text, patterns):
                return level
        return CommunityConnectionLevel.EXPLORING

    def detect_access_preference(self, text: str) -> AccessPreference:
        text = normalize_text(text)
        for preference, patterns in self._access:
            if _matches(text, patterns):
                return preference
        return AccessPreference.FLEXIBLE

    def extract_topic(self, text: str, memories: Sequence[MemoryRecord] = ()) -> Optional[str]:
        """Category hint for registry queries, or None when nothing points anywhere."""
        text = normalize_text(text)
        for topic, patterns in self._topics:
            if _matches(text, patterns):
                return topic

        needs = [m for m in memories if m.memory_type == "support_need" and m.value.strip()]
        if needs:
            best = max(needs, key=lambda m: m.importance)
            return best.value.strip().lower()
        return None

    # --- Journey progression ---

    @staticmethod
    def next_stage_pathway(
        stage: JourneyStage, previous_stages: Sequence[JourneyStage] = ()
    ) -> Optional[str]:
        """Guidance towards the following stage, only when the stage is new for this user."""
        if previous_stages and JourneyStage(previous_stages[-1]) == stage:
            return None
        return NEXT_STAGE_GUIDANCE[stage]

    @staticmethod
    def assess_next_stage_readiness(
        context: JourneyContext, history: Sequence[JourneyStage] = ()
    ) -> bool:
        history = [JourneyStage(s) for s in history]

        if context.stage == JourneyStage.CRISIS and history.count(JourneyStage.CRISIS) < 3:
            return False
        if context.stage == JourneyStage.STABILIZATION and JourneyStage.GROWTH in history:
            return True
        if context.community_connection == CommunityConnectionLevel.ORGANIZING:
            return context.stage != JourneyStage.ADVOCACY
        return True


def _remembered_formality(memories: Sequence[MemoryRecord]) -> Formality:
    styles = [m for m in memories if m.memory_type == "communication_style"]
    for memory in sorted(styles, key=lambda m: m.importance, reverse=True):
        try:
            return Formality(memory.value.strip().lower())
        except ValueError:
            continue
    return Formality.MIXED
