"""ContextExtractor: reduces a reference blog URL to a bounded style excerpt."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import httpx

from blogzen.config.models import ExtractorSettings
from blogzen.extractor.html import html_to_text
from blogzen.extractor.models import FETCH_FAILED_PLACEHOLDER, FetchFailure, StyleContext

logger = logging.getLogger(__name__)


def _validate_reference_url(url: str) -> str:
    """Reject non-http(s) schemes and header injection before fetching."""
    if "\r" in url or "\n" in url:
        raise FetchFailure("CRLF injection detected in reference URL")

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise FetchFailure(f"Reference URL must be http(s), got {parsed.scheme or 'no scheme'!r}")
    if not parsed.netloc:
        raise FetchFailure("Reference URL has no host")
    return url


class ContextExtractor:
    """Fetches a reference page once and turns it into a StyleContext.

    Failures never propagate: an unreachable or unusable page yields a
    StyleContext carrying FETCH_FAILED_PLACEHOLDER so drafting can continue.
    """

    def __init__(
        self,
        config: ExtractorSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or ExtractorSettings()
        self._transport = transport

    async def extract(self, url: str | None) -> StyleContext | None:
        """Return the style context for ``url``, or None when no URL was given."""
        if not url or not url.strip():
            return None

        url = url.strip()
        try:
            markup = await self._fetch(_validate_reference_url(url))
            excerpt = html_to_text(markup, self.config.max_excerpt_chars)
        except (FetchFailure, httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("Could not extract reference context from %s: %s", url, e)
            return StyleContext(
                raw_excerpt=FETCH_FAILED_PLACEHOLDER,
                source_url=url,
                status="failed",
            )

        return StyleContext(raw_excerpt=excerpt, source_url=url, status="fetched")

    async def _fetch(self, url: str) -> str:
        async with httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=self.config.follow_redirects,
            transport=self._transport,
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.text
