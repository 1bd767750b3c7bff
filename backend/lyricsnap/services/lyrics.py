from __future__ import annotations

import logging

from fastapi import Depends

from lyricsnap.config import AppSettings, get_settings
from lyricsnap.exceptions import ExtractionError, ValidationError
from lyricsnap.models.lyrics import LyricsResponse

from .extractor import LyricsExtractor
from .providers import LyricsProvider, get_provider

logger = logging.getLogger(__name__)


class LyricsService:
    def __init__(self, provider: LyricsProvider, extractor: LyricsExtractor) -> None:
        self._provider = provider
        self._extractor = extractor

    async def get_lyrics(self, song_url: str) -> LyricsResponse:
        song_url = (song_url or "").strip()
        if not song_url:
            raise ValidationError("Either songUrl or query parameter is required")

        html = await self._provider.fetch_page(song_url)
        try:
            lyrics = self._extractor.extract(html)
        except ExtractionError:
            logger.error("Failed to extract lyrics from %s after attempting selectors", song_url)
            raise

        return LyricsResponse(lyrics=lyrics)


def get_lyrics_service(settings: AppSettings = Depends(get_settings)) -> LyricsService:
    return LyricsService(get_provider(settings), LyricsExtractor(settings.extractor))
