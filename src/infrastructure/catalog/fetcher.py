from __future__ import annotations

import logging

import httpx

from src.application.errors import SourceFetchError

logger = logging.getLogger(__name__)


class CsvFetcher:
    """Downloads the upstream breed lists. No retries: a failed fetch aborts the run."""

    def __init__(
        self,
        *,
        user_agent: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    async def fetch_text(self, url: str) -> str:
        headers = {"User-Agent": self.user_agent}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, follow_redirects=True
            ) as client:
                resp = await client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Fetch error for %s: %s", url, exc)
            raise SourceFetchError(url, reason=str(exc) or exc.__class__.__name__) from exc
        if not resp.is_success:
            logger.error("Fetch failed %s for %s", resp.status_code, url)
            raise SourceFetchError(url, status=resp.status_code)
        logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
        return resp.text
