from __future__ import annotations

import logging

from fastapi import Depends

from lyricsnap.config import AppSettings, get_settings
from lyricsnap.exceptions import ValidationError
from lyricsnap.models.lyrics import SearchResponse

from .providers import LyricsProvider, get_provider

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, provider: LyricsProvider) -> None:
        self._provider = provider

    async def search(self, query: str) -> SearchResponse:
        query = (query or "").strip()
        if not query:
            raise ValidationError("Either songUrl or query parameter is required")

        results = await self._provider.search(query)
        logger.info("Search for %r returned %d songs", query, len(results))
        return SearchResponse(results=results)


def get_search_service(settings: AppSettings = Depends(get_settings)) -> SearchService:
    return SearchService(get_provider(settings))
