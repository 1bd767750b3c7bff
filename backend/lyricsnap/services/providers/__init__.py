from lyricsnap.config import AppSettings

from .base import LyricsProvider
from .genius import GeniusProvider


def get_provider(settings: AppSettings) -> LyricsProvider:
    return GeniusProvider(settings.provider)


__all__ = ["GeniusProvider", "LyricsProvider", "get_provider"]
