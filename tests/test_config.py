from lyricsnap.config import AppSettings, ExtractorSettings, GeniusSettings


def test_default_config():
    settings = AppSettings()
    assert settings.max_selected_lines == 4
    assert settings.provider.search_url == "https://genius.com/api/search/multi"
    assert settings.provider.per_page == 5
    assert settings.extractor.container_selector == 'div[data-lyrics-container="true"]'
    assert settings.extractor.fallback_selectors == [".lyrics", ".SongPage__LyricsText-sc-19xhmoi-0"]
    assert settings.extractor.header_overlap_chars == 10


def test_genius_config_from_env(monkeypatch):
    monkeypatch.setenv("GENIUS_PER_PAGE", "10")
    monkeypatch.setenv("GENIUS_TIMEOUT", "3.5")
    settings = GeniusSettings()
    assert settings.per_page == 10
    assert settings.timeout == 3.5


def test_extractor_config_from_env(monkeypatch):
    monkeypatch.setenv("LYRICSNAP_EXTRACTOR_CONTAINER_SELECTOR", "div.Lyrics__Container")
    monkeypatch.setenv("LYRICSNAP_EXTRACTOR_FALLBACK_SELECTORS", '[".old-lyrics"]')
    monkeypatch.setenv("LYRICSNAP_EXTRACTOR_HEADER_OVERLAP_CHARS", "6")
    settings = ExtractorSettings()
    assert settings.container_selector == "div.Lyrics__Container"
    assert settings.fallback_selectors == [".old-lyrics"]
    assert settings.header_overlap_chars == 6


def test_selection_limit_from_env(monkeypatch):
    monkeypatch.setenv("LYRICSNAP_MAX_SELECTED_LINES", "6")
    assert AppSettings().max_selected_lines == 6
