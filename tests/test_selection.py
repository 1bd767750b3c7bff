import pytest

from lyricsnap.exceptions import SelectionError
from lyricsnap.services.selection import (
    LineSelection,
    build_excerpt,
    export_filename,
    is_contiguous,
    select_line,
)


def test_first_click_selects_line():
    assert select_line((), 5).selected == (5,)


def test_clicking_selected_line_clears_everything():
    outcome = select_line((4, 5, 6), 5)
    assert outcome.selected == ()
    assert not outcome.rejected


def test_adjacent_clicks_extend_run():
    sel = LineSelection()
    for index in (5, 6, 4, 7):
        sel.click(index)
    assert sel.selected == (4, 5, 6, 7)


def test_fifth_adjacent_click_rejected():
    sel = LineSelection()
    for index in (5, 6, 4, 7):
        sel.click(index)

    outcome = sel.click(8)
    assert outcome.rejected
    assert outcome.message == "You can only select up to 4 consecutive lines."
    assert sel.selected == (4, 5, 6, 7)


def test_far_click_rejected_when_full():
    outcome = select_line((1, 2, 3, 4), 10)
    assert outcome.rejected
    assert outcome.selected == (1, 2, 3, 4)


def test_far_click_restarts_selection():
    outcome = select_line((1, 2), 10)
    assert outcome.selected == (10,)
    assert not outcome.rejected


def test_click_inside_full_run_clears_it():
    assert select_line((1, 2, 3, 4), 2).selected == ()


def test_max_lines_is_configurable():
    sel = LineSelection(max_lines=2)
    sel.click(3)
    sel.click(4)
    assert sel.click(5).rejected
    assert sel.selected == (3, 4)


def test_inconsistent_selection_is_reset():
    assert select_line((1, 3), 4).selected == (4,)
    assert select_line((1, 2, 3, 4, 5), 6).selected == (6,)


def test_selection_stays_contiguous():
    sel = LineSelection()
    for index in (3, 9, 8, 10, 2, 7, 6, 11, 8, 0, 1):
        sel.click(index)
        assert len(sel.selected) <= 4
        assert is_contiguous(sel.selected)


def test_clear():
    sel = LineSelection()
    sel.click(1)
    sel.clear()
    assert sel.selected == ()


def test_is_contiguous():
    assert is_contiguous([])
    assert is_contiguous([3])
    assert is_contiguous([5, 3, 4])
    assert not is_contiguous([1, 3])


def test_build_excerpt():
    lyrics = "We were both young\nI close my eyes\n\nRomeo, take me somewhere"
    excerpt = build_excerpt(lyrics, [1, 0], title="Love Story", artist="Taylor Swift")
    assert excerpt.lines == ["We were both young", "I close my eyes"]
    assert excerpt.filename == "love_story_selection.png"
    assert excerpt.artist == "Taylor Swift"


def test_build_excerpt_requires_selection():
    with pytest.raises(SelectionError, match="select some lyrics"):
        build_excerpt("a\nb", [], title="Song")


def test_build_excerpt_requires_contiguous_lines():
    with pytest.raises(SelectionError, match="consecutive"):
        build_excerpt("a\nb\nc", [0, 2], title="Song")


def test_build_excerpt_rejects_long_runs():
    with pytest.raises(SelectionError):
        build_excerpt("a\nb\nc\nd\ne", [0, 1, 2, 3, 4], title="Song")


def test_build_excerpt_rejects_out_of_range():
    with pytest.raises(SelectionError):
        build_excerpt("a\nb", [1, 2], title="Song")


def test_export_filename():
    assert export_filename("Don't Stop Me Now!") == "don_t_stop_me_now__selection.png"
