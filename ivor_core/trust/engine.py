"""
Trust Score Engine — normalized [0,1] confidence for knowledge and resources.

Knowledge scores combine four clamped terms:
  0.35  source validity ratio (reachable sources / all sources, 0 if none)
  0.25  recency (full credit inside the freshness window, linear to 0 at the horizon)
  0.25  verification status (verified 1.0, pending 0.5, outdated 0.0)
  0.15  community validation

Resource scores are synchronous and need no network:
  0.30  cultural competency (flags set / 4)
  0.30  cost favourability (free/NHS 1.0, sliding scale 0.6, paid 0.3)
  0.20  emergency flag
  0.20  verifiable contact channel (phone or website)

Source reachability is cached per URL with a TTL and bounded, oldest-first
eviction. The cache is the only state shared across turns. A failed or
timed-out probe is recorded as unreachable and retried once the entry expires.
"""

import asyncio
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional
from urllib.parse import urlparse

from ivor_core.models.resources import CostTier, KnowledgeEntry, Resource, VerificationStatus
from ivor_core.models.trust import (
    SourceVerification,
    TrustCacheEntry,
    TrustConfig,
    TrustInterpretation,
    TrustLevel,
)
from ivor_core.trust.probe import HttpUrlProber, UrlProber

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

SOURCE_VALIDITY_WEIGHT = 0.35
RECENCY_WEIGHT = 0.25
STATUS_WEIGHT = 0.25
COMMUNITY_WEIGHT = 0.15

CULTURAL_WEIGHT = 0.30
COST_WEIGHT = 0.30
EMERGENCY_WEIGHT = 0.20
CONTACT_WEIGHT = 0.20

STATUS_SCORES = {
    VerificationStatus.VERIFIED: 1.0,
    VerificationStatus.PENDING: 0.5,
    VerificationStatus.OUTDATED: 0.0,
}

COST_SCORES = {
    CostTier.FREE: 1.0,
    CostTier.NHS_FUNDED: 1.0,
    CostTier.SLIDING_SCALE: 0.6,
    CostTier.PAID: 0.3,
}

INTERPRETATIONS = {
    TrustLevel.HIGH: TrustInterpretation(
        level=TrustLevel.HIGH,
        description="Highly trusted - verified official sources",
        color="green",
    ),
    TrustLevel.MEDIUM: TrustInterpretation(
        level=TrustLevel.MEDIUM,
        description="Good trust - reliable sources with recent updates",
        color="blue",
    ),
    TrustLevel.LOW: TrustInterpretation(
        level=TrustLevel.LOW,
        description="Limited trust - older information or unverified sources",
        color="orange",
    ),
    TrustLevel.VERY_LOW: TrustInterpretation(
        level=TrustLevel.VERY_LOW,
        description="Low trust - outdated or unverified information",
        color="red",
    ),
}

_BARE_DOMAIN = re.compile(r"^[a-z0-9-]+(\.[a-z0-9-]+)+(/\S*)?$", re.IGNORECASE)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def normalize_source(source: str) -> Optional[str]:
    """
    Turn a knowledge source into a probeable URL, or None if it cannot be probed.

    "https://tht.org.uk" stays as is, "NHS.uk" becomes "https://NHS.uk",
    "Stonewall" and "ftp://host" give None.
    """
    text = (source or "").strip()
    if not text:
        return None
    if "://" in text:
        parsed = urlparse(text)
        if parsed.scheme.lower() in ("http", "https") and parsed.netloc:
            return text
        return None
    if _BARE_DOMAIN.match(text):
        return f"https://{text}"
    return None


def recency_factor(
    last_updated: datetime,
    now: datetime,
    freshness_days: int = 180,
    horizon_days: int = 730,
) -> float:
    age_days = (now - last_updated).total_seconds() / 86400
    if age_days <= freshness_days:
        return 1.0
    if age_days >= horizon_days:
        return 0.0
    return _clamp(1.0 - (age_days - freshness_days) / (horizon_days - freshness_days))


def knowledge_trust_score(
    entry: KnowledgeEntry,
    source_verdicts: Dict[str, bool],
    now: datetime,
    config: Optional[TrustConfig] = None,
) -> float:
    """
    Pure knowledge score from already-known source verdicts.

    `source_verdicts` is keyed by the entry's source strings as written;
    a source with no verdict counts as unverified.
    """
    config = config or TrustConfig()

    if entry.sources:
        valid = sum(1 for s in entry.sources if source_verdicts.get(s, False))
        validity = _clamp(valid / len(entry.sources))
    else:
        validity = 0.0

    recency = recency_factor(
        entry.last_updated, now, config.freshness_days, config.staleness_horizon_days,
    )
    status = _clamp(STATUS_SCORES.get(entry.verification_status, 0.0))
    community = 1.0 if entry.community_validated else 0.0

    score = (
        SOURCE_VALIDITY_WEIGHT * validity
        + RECENCY_WEIGHT * recency
        + STATUS_WEIGHT * status
        + COMMUNITY_WEIGHT * community
    )
    return _clamp(score)


def resource_trust_score(resource: Resource) -> float:
    cultural = _clamp(resource.cultural_competency.match_count / 4)
    cost = _clamp(COST_SCORES.get(resource.cost, 0.0))
    emergency = 1.0 if resource.emergency else 0.0
    contact = 1.0 if resource.has_contact_channel else 0.0

    score = (
        CULTURAL_WEIGHT * cultural
        + COST_WEIGHT * cost
        + EMERGENCY_WEIGHT * emergency
        + CONTACT_WEIGHT * contact
    )
    return _clamp(score)


def get_trust_score_interpretation(score: float) -> TrustInterpretation:
    if score >= 0.8:
        return INTERPRETATIONS[TrustLevel.HIGH]
    if score >= 0.6:
        return INTERPRETATIONS[TrustLevel.MEDIUM]
    if score >= 0.4:
        return INTERPRETATIONS[TrustLevel.LOW]
    return INTERPRETATIONS[TrustLevel.VERY_LOW]


class TrustCache:
    """URL -> last verdict, fresh while younger than the TTL, capped at max_entries."""

    def __init__(self, ttl_seconds: int, max_entries: int, clock: Optional[Clock] = None):
        self.ttl = timedelta(seconds=ttl_seconds)
        self.max_entries = max_entries
        self._clock = clock or _utcnow
        self._entries: Dict[str, TrustCacheEntry] = {}
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def _is_fresh(self, entry: TrustCacheEntry) -> bool:
        return self._clock() - entry.checked_at < self.ttl

    def get(self, url: str) -> Optional[TrustCacheEntry]:
        entry = self._entries.get(url)
        if entry is not None and self._is_fresh(entry):
            self.hits += 1
            return entry
        self.misses += 1
        return None

    def put(self, url: str, is_valid: bool) -> TrustCacheEntry:
        entry = TrustCacheEntry(url=url, is_valid=is_valid, checked_at=self._clock())
        self._entries.pop(url, None)
        self._entries[url] = entry
        while len(self._entries) > self.max_entries:
            oldest = min(self._entries, key=lambda k: self._entries[k].checked_at)
            del self._entries[oldest]
            self.evictions += 1
        return entry

    def clear_expired(self) -> int:
        expired = [url for url, entry in self._entries.items() if not self._is_fresh(entry)]
        for url in expired:
            del self._entries[url]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: str) -> bool:
        return url in self._entries


class TrustScoreEngine:
    """
    Scores knowledge entries and resources, validating source URLs on demand.

    Probes run concurrently under a semaphore of `max_concurrent_probes`.
    Concurrent validations of the same URL share one in-flight task, and a
    caller that stops waiting (deadline) does not cancel the probe: it keeps
    running and fills the cache for the next turn.
    """

    def __init__(
        self,
        config: Optional[TrustConfig] = None,
        prober: Optional[UrlProber] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config or TrustConfig()
        self._clock = clock or _utcnow
        self.prober = prober or HttpUrlProber(
            timeout_seconds=self.config.probe_timeout_seconds,
            user_agent=self.config.user_agent,
        )
        self.cache = TrustCache(
            ttl_seconds=self.config.cache_ttl_seconds,
            max_entries=self.config.cache_max_entries,
            clock=self._clock,
        )
        self._in_flight: Dict[str, asyncio.Task] = {}
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self.probes_issued = 0
        self.probe_failures = 0
        self.last_probe_at: Optional[datetime] = None

    def _bind_loop(self) -> asyncio.Semaphore:
        loop = asyncio.get_running_loop()
        if self._loop is not loop:
            self._loop = loop
            self._semaphore = asyncio.Semaphore(self.config.max_concurrent_probes)
            self._in_flight = {}
        return self._semaphore

    # --- Source validation ---

    async def validate_source_url(self, url: str) -> bool:
        """Reachability of one source, from cache when fresh, else by a single probe."""
        target = normalize_source(url)
        if target is None:
            return False

        cached = self.cache.get(target)
        if cached is not None:
            logger.debug(f"Trust cache hit for {target}: {cached.is_valid}")
            return cached.is_valid

        self._bind_loop()
        task = self._in_flight.get(target)
        if task is None:
            task = asyncio.ensure_future(self._probe_and_cache(target))
            self._in_flight[target] = task
            task.add_done_callback(lambda _t, key=target: self._in_flight.pop(key, None))
        return await asyncio.shield(task)

    async def _probe_and_cache(self, url: str) -> bool:
        semaphore = self._bind_loop()
        async with semaphore:
            self.probes_issued += 1
            logger.debug(f"Probing {url}")
            try:
                is_valid = await asyncio.wait_for(
                    self.prober.probe(url), timeout=self.config.probe_timeout_seconds,
                )
            except asyncio.TimeoutError:
                logger.warning(f"URL probe timed out for {url}")
                is_valid = False
            except Exception as e:
                logger.warning(f"URL probe error for {url}: {e}")
                is_valid = False
            if not is_valid:
                self.probe_failures += 1
            self.last_probe_at = self._clock()
            self.cache.put(url, bool(is_valid))
            return bool(is_valid)

    async def validate_multiple_urls(
        self,
        urls: Iterable[str],
        deadline: Optional[float] = None,
    ) -> Dict[str, bool]:
        """
        Validate many sources at once. Keys are the sources as given.

        With a `deadline` (seconds), anything still unresolved when it expires
        is reported False; its probe keeps running in the background.
        """
        unique = list(dict.fromkeys(urls))
        if not unique:
            return {}

        tasks = {url: asyncio.ensure_future(self.validate_source_url(url)) for url in unique}
        done, pending = await asyncio.wait(tasks.values(), timeout=deadline)

        if pending:
            logger.warning(
                f"Source validation deadline of {deadline}s expired with "
                f"{len(pending)} of {len(unique)} sources unresolved"
            )
            for task in pending:
                task.cancel()

        results: Dict[str, bool] = {}
        for url, task in tasks.items():
            if task in done and not task.cancelled() and task.exception() is None:
                results[url] = bool(task.result())
            else:
                results[url] = False
        return results

    # --- Scoring ---

    async def calculate_knowledge_trust_score(
        self,
        entry: KnowledgeEntry,
        now: Optional[datetime] = None,
    ) -> float:
        verdicts = await self.validate_multiple_urls(entry.sources)
        return knowledge_trust_score(entry, verdicts, now or self._clock(), self.config)

    def score_knowledge(
        self,
        entry: KnowledgeEntry,
        source_verdicts: Dict[str, bool],
        now: Optional[datetime] = None,
    ) -> float:
        return knowledge_trust_score(entry, source_verdicts, now or self._clock(), self.config)

    def calculate_resource_trust_score(self, resource: Resource) -> float:
        return resource_trust_score(resource)

    def get_trust_score_interpretation(self, score: float) -> TrustInterpretation:
        return get_trust_score_interpretation(score)

    def source_verification(
        self,
        entries: List[KnowledgeEntry],
        source_verdicts: Dict[str, bool],
    ) -> SourceVerification:
        """Counts over every source cited by `entries`."""
        sources = [s for entry in entries for s in entry.sources]
        verified = sum(1 for s in sources if source_verdicts.get(s, False))
        return SourceVerification(
            verified=verified,
            unverified=len(sources) - verified,
            total=len(sources),
        )

    # --- Maintenance ---

    def clear_expired_cache(self) -> int:
        removed = self.cache.clear_expired()
        if removed:
            logger.info(f"Cleared {removed} expired trust cache entries")
        return removed

    def get_system_health(self) -> dict:
        lookups = self.cache.hits + self.cache.misses
        return {
            "cache_size": len(self.cache),
            "cache_capacity": self.cache.max_entries,
            "cache_hits": self.cache.hits,
            "cache_misses": self.cache.misses,
            "cache_hit_rate": (self.cache.hits / lookups) if lookups else 0.0,
            "probes_issued": self.probes_issued,
            "probe_failures": self.probe_failures,
            "evictions": self.cache.evictions,
            "in_flight": len(self._in_flight),
            "last_probe_at": self.last_probe_at.isoformat() if self.last_probe_at else None,
        }
