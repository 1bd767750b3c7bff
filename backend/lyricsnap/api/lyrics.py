from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from lyricsnap.exceptions import ValidationError
from lyricsnap.models.common import ErrorResponse
from lyricsnap.models.lyrics import LyricsResponse, SearchResponse
from lyricsnap.services.lyrics import LyricsService, get_lyrics_service
from lyricsnap.services.search import SearchService, get_search_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=None,
    responses={
        200: {"description": "`{results: [...]}` for a search, `{lyrics: \"...\"}` for a song page"},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Search songs by keyword, or fetch the lyrics of one song page",
)
async def lyrics(
    query: str | None = Query(default=None, description="Free-text song search"),
    song_url: str | None = Query(default=None, alias="songUrl", description="Genius song page URL"),
    search_service: SearchService = Depends(get_search_service),
    lyrics_service: LyricsService = Depends(get_lyrics_service),
) -> SearchResponse | LyricsResponse:
    logger.info("Lyrics request - query: %r, songUrl: %r", query, song_url)

    # songUrl wins when both are present.
    if song_url and song_url.strip():
        return await lyrics_service.get_lyrics(song_url)
    if query and query.strip():
        return await search_service.search(query)

    raise ValidationError("Either songUrl or query parameter is required")
