from __future__ import annotations

import logging
from typing import Any

import httpx

from lyricsnap.config import GeniusSettings
from lyricsnap.exceptions import UpstreamFetchError
from lyricsnap.models.lyrics import SearchResult

from .base import LyricsProvider

logger = logging.getLogger(__name__)


class GeniusProvider(LyricsProvider):
    def __init__(self, settings: GeniusSettings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        # Only set by tests, which hand in an httpx.MockTransport.
        self._transport = transport

    def _client(self, headers: dict[str, str]) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._settings.timeout,
            headers=headers,
            follow_redirects=True,
            transport=self._transport,
        )

    async def search(self, query: str) -> list[SearchResult]:
        params = {"per_page": self._settings.per_page, "q": query}
        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept": "application/json",
        }

        logger.info("Searching Genius for %r", query)
        async with self._client(headers) as client:
            try:
                resp = await client.get(self._settings.search_url, params=params)
                resp.raise_for_status()
                data: Any = resp.json()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.error("Genius search failed with status %s", status)
                raise UpstreamFetchError(f"Failed to fetch data from Genius: HTTP {status}", status) from e
            except httpx.HTTPError as e:
                logger.error("Genius search request failed: %s", e)
                raise UpstreamFetchError(f"Failed to fetch data from Genius: {e}") from e
            except ValueError as e:
                raise UpstreamFetchError("Failed to fetch data from Genius: invalid search response") from e

        return parse_search_hits(data)

    async def fetch_page(self, url: str) -> str:
        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }

        logger.info("Fetching lyrics page %s", url)
        async with self._client(headers) as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.error("Lyrics page %s answered with status %s", url, status)
                raise UpstreamFetchError(
                    f"Failed to fetch lyrics page from Genius (Status: {status})", status, status_code=502
                ) from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.error("Error fetching lyrics page from %s: %s", url, e)
                raise UpstreamFetchError(
                    "Failed to fetch lyrics page from Genius (Status: Unknown)", status_code=502
                ) from e

        logger.debug("Fetched %s with status %s", url, resp.status_code)
        return resp.text


def parse_search_hits(data: Any) -> list[SearchResult]:
    response = data.get("response") if isinstance(data, dict) else None
    sections = response.get("sections") if isinstance(response, dict) else None
    if not isinstance(sections, list):
        return []

    song_section = next((s for s in sections if isinstance(s, dict) and s.get("type") == "song"), None)
    if song_section is None:
        return []

    hits = song_section.get("hits")
    if not isinstance(hits, list):
        return []

    results: list[SearchResult] = []
    for hit in hits:
        try:
            res = hit["result"]
            results.append(
                SearchResult(
                    id=res["id"],
                    title=res["title"],
                    artist=res["primary_artist"]["name"],
                    url=res["url"],
                    thumbnail_url=res.get("song_art_image_thumbnail_url"),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.debug("Skipping malformed search hit: %s", e)
            continue
    return results
