from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    id: int
    title: str
    artist: str
    url: str
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")

    model_config = ConfigDict(populate_by_name=True)


class SearchResponse(BaseModel):
    results: List[SearchResult] = Field(default_factory=list)


class LyricsResponse(BaseModel):
    lyrics: str = Field(description="Cleaned lyrics, one line per row, stanzas separated by a blank line")
