from __future__ import annotations

import copy
import logging
import re
from typing import Iterable

from bs4 import BeautifulSoup, Tag

from lyricsnap.config import ExtractorSettings
from lyricsnap.exceptions import ExtractionError

logger = logging.getLogger(__name__)

EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def normalize_blank_lines(text: str) -> str:
    """Collapse runs of blank lines down to a single one and trim the result."""
    return EXCESS_NEWLINES_RE.sub("\n\n", text).strip()


def remove_noise(text: str, patterns: Iterable[re.Pattern[str]]) -> str:
    # Matching lines are emptied, not removed; the blank left behind is collapsed later.
    for pattern in patterns:
        text = pattern.sub("", text)
    return text


def drop_repeated_header(text: str, overlap_chars: int = 10, ignore_blank: bool = False) -> str:
    """
    Drop the first line when it looks like a repeat of the title.

    Genius sometimes prints the song title right before the lyrics. The first
    line is treated as such a header when, lowercased, it contains the first
    ``overlap_chars`` lowercased characters of the second line. A blank second
    line is contained in any first line and so drops it, unless ``ignore_blank``
    is set.
    """
    lines = text.split("\n")
    if len(lines) <= 2:
        return text

    prefix = lines[1].lower()[:overlap_chars]
    if ignore_blank and not prefix.strip():
        return text
    if prefix in lines[0].lower():
        logger.debug("Dropping repeated header line %r", lines[0])
        lines.pop(0)
    return "\n".join(lines)


def compile_noise_patterns(settings: ExtractorSettings) -> list[re.Pattern[str]]:
    return [
        re.compile(settings.contributor_pattern, re.MULTILINE),
        re.compile(settings.annotation_pattern, re.MULTILINE),
    ]


def strip_noise(text: str, settings: ExtractorSettings) -> str:
    """Normalize blank lines and blank out credit and section-label lines."""
    text = normalize_blank_lines(text)
    text = remove_noise(text, compile_noise_patterns(settings))
    return normalize_blank_lines(text)


def clean_lyrics(text: str, settings: ExtractorSettings | None = None) -> str:
    settings = settings or ExtractorSettings()
    text = normalize_blank_lines(text)
    # Blanked noise lines stay in place until the header check has run.
    text = remove_noise(text, compile_noise_patterns(settings))
    text = drop_repeated_header(
        text, settings.header_overlap_chars, ignore_blank=settings.ignore_blank_header_match
    )
    return normalize_blank_lines(text)


class LyricsExtractor:
    """Turns a Genius song page into plain-text lyrics."""

    def __init__(self, settings: ExtractorSettings | None = None) -> None:
        self._settings = settings or ExtractorSettings()

    def extract(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")

        containers = soup.select(self._settings.container_selector)
        lyrics = clean_lyrics(self._collect_text(containers), self._settings)
        if lyrics:
            return lyrics

        logger.warning(
            "No lyrics found with %r (%d containers), trying fallback selectors",
            self._settings.container_selector,
            len(containers),
        )
        fallback: list[Tag] = []
        if self._settings.fallback_selectors:
            fallback = soup.select(", ".join(self._settings.fallback_selectors))
        lyrics = clean_lyrics(self._collect_text(fallback), self._settings)
        if lyrics:
            return lyrics

        raise ExtractionError("Could not extract lyrics content from the Genius page.")

    def _collect_text(self, containers: list[Tag]) -> str:
        parts: list[str] = []
        for container in containers:
            container = copy.copy(container)
            for excluded in container.select(self._settings.excluded_selector):
                excluded.decompose()
            # Line breaks must become text before the markup is discarded.
            for br in container.find_all("br"):
                br.replace_with("\n")
            parts.append(container.get_text().strip())
        return "\n\n".join(parts)
