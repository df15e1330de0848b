"""URL reachability probes used by the Trust Score Engine."""

import logging
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)


class UrlProber(Protocol):
    """Collaborator answering "is this URL reachable right now?"."""

    async def probe(self, url: str) -> bool:
        ...


class HttpUrlProber:
    """
    Single HEAD request per probe, bounded by a timeout.

    A 2xx answer (after redirects) is reachable. Anything else, including
    transport errors and timeouts, is not; the prober never raises.
    """

    def __init__(self, timeout_seconds: float = 5.0, user_agent: str = "IVOR-Health-Bot/1.0"):
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent

    async def probe(self, url: str) -> bool:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
            ) as client:
                response = await client.head(url)
                return response.is_success
        except httpx.HTTPError as e:
            logger.warning(f"URL probe failed for {url}: {e.__class__.__name__}")
            return False
