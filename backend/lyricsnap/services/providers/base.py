from __future__ import annotations

from abc import ABC, abstractmethod

from lyricsnap.models.lyrics import SearchResult


class LyricsProvider(ABC):
    """
    Upstream site that can search songs and serve their lyrics pages.
    """

    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        ...

    @abstractmethod
    async def fetch_page(self, url: str) -> str:
        ...
