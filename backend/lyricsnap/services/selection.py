"""
Line selection for lyric excerpts.

The user picks lines by clicking them one at a time. A selection is always
either empty or a run of consecutive line indices no longer than
``max_lines``; :func:`select_line` is the only place that decides how a click
changes it.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from lyricsnap.exceptions import SelectionError
from lyricsnap.models.selection import Excerpt, SelectionOutcome

logger = logging.getLogger(__name__)

MAX_SELECTED_LINES = 4

FILENAME_UNSAFE_RE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def is_contiguous(indices: Iterable[int]) -> bool:
    ordered = sorted(indices)
    return all(cur == prev + 1 for prev, cur in zip(ordered, ordered[1:]))


def select_line(current: Iterable[int], index: int, max_lines: int = MAX_SELECTED_LINES) -> SelectionOutcome:
    """
    Apply a click on line ``index`` to the ``current`` selection.

    - nothing selected: select ``index`` alone
    - ``index`` already selected: clear the whole selection
    - ``index`` touches either end of the run and there is room: extend the run
    - the run is full: refuse the click and keep the selection
    - anything else: start over from ``index``
    """
    run = sorted(set(current))
    if run and (not is_contiguous(run) or len(run) > max_lines):
        # Not a state we can produce; start over rather than extend it.
        logger.warning("Discarding inconsistent selection %s", run)
        run = []

    if not run:
        return SelectionOutcome(selected=(index,))

    if index in run:
        return SelectionOutcome(selected=())

    adjacent = index == run[0] - 1 or index == run[-1] + 1
    if adjacent and len(run) < max_lines:
        return SelectionOutcome(selected=tuple(sorted(run + [index])))

    if len(run) >= max_lines:
        return SelectionOutcome(
            selected=tuple(run),
            rejected=True,
            message=f"You can only select up to {max_lines} consecutive lines.",
        )

    return SelectionOutcome(selected=(index,))


class LineSelection:
    """Selection state for one lyrics view; reset whenever new lyrics are loaded."""

    def __init__(self, max_lines: int = MAX_SELECTED_LINES) -> None:
        self.max_lines = max_lines
        self._selected: tuple[int, ...] = ()

    @property
    def selected(self) -> tuple[int, ...]:
        return self._selected

    def click(self, index: int) -> SelectionOutcome:
        outcome = select_line(self._selected, index, self.max_lines)
        if outcome.rejected:
            logger.info("Rejected click on line %d: %s", index, outcome.message)
        self._selected = outcome.selected
        return outcome

    def clear(self) -> None:
        self._selected = ()


def export_filename(title: str) -> str:
    return f"{FILENAME_UNSAFE_RE.sub('_', title).lower()}_selection.png"


def build_excerpt(
    lyrics: str,
    indices: Iterable[int],
    title: str,
    artist: str = "",
    max_lines: int = MAX_SELECTED_LINES,
) -> Excerpt:
    """
    Validate a selection and collect the lines to render.

    The selection is re-checked here even though :func:`select_line` never
    produces a broken one, since the indices come back from the client.
    """
    ordered = sorted(set(indices))
    if not ordered:
        raise SelectionError("Please select some lyrics lines first.")
    if not is_contiguous(ordered):
        raise SelectionError("Please select consecutive lines.")
    if len(ordered) > max_lines:
        raise SelectionError(f"You can only select up to {max_lines} consecutive lines.")

    lines: Sequence[str] = lyrics.split("\n")
    if ordered[0] < 0 or ordered[-1] >= len(lines):
        raise SelectionError("Selected lines are outside of the lyrics.")

    return Excerpt(
        title=title,
        artist=artist,
        lines=[lines[i] for i in ordered],
        filename=export_filename(title),
    )
