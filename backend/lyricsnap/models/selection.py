from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field


class SelectionOutcome(BaseModel):
    selected: Tuple[int, ...] = Field(default=(), description="Sorted indices of the selected lines")
    rejected: bool = Field(default=False, description="True when the click was refused and nothing changed")
    message: str | None = Field(default=None, description="Warning to show the user when rejected")


class ExcerptRequest(BaseModel):
    lyrics: str = Field(description="Lyrics exactly as returned by GET /lyrics")
    indices: list[int] = Field(default_factory=list, description="Selected line indices")
    title: str
    artist: str = ""


class Excerpt(BaseModel):
    title: str
    artist: str = ""
    lines: list[str] = Field(default_factory=list)
    filename: str
