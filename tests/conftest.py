import pytest

from lyricsnap.config import AppSettings, ExtractorSettings


def lyrics_page(*containers: str, extra: str = "") -> str:
    blocks = "".join(f'<div data-lyrics-container="true">{c}</div>' for c in containers)
    return f"<html><head><title>Song</title></head><body>{extra}{blocks}</body></html>"


@pytest.fixture
def extractor_settings():
    return ExtractorSettings()


@pytest.fixture
def app_settings():
    return AppSettings(cors_allow_origins=["http://localhost:3000"])
