"""
Best-fit selection: continuity, first fit, least displacement, fallback.
"""

from __future__ import annotations

import pytest

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.geometry import Rect, Size
from menu_overlay.core.selection import best_fit_geometry
from menu_overlay.core.types import MenuAlignment, MenuPosition

TARGET = Rect(0, 0, 300, 300)


def _below(id: str, preview: Rect, menu: Size = Size(100, 50)) -> MenuGeometry:
    return MenuGeometry(
        id=id,
        preview_rect=preview,
        menu_size=menu,
        menu_position=MenuPosition("align_left", "below", menu, spacing=15.0),
        menu_alignment=MenuAlignment.TOP_LEFT,
    )


def test_first_fit_returned_unchanged() -> None:
    candidates = [
        _below("a", Rect(250, 100, 100, 50)),
        _below("b", Rect(-10, 100, 100, 50)),
        _below("c", Rect(50, 50, 100, 50)),
        _below("d", Rect(60, 60, 100, 50)),
    ]
    chosen = best_fit_geometry(TARGET, candidates)
    assert chosen is candidates[2]
    assert chosen.preview_rect == Rect(50, 50, 100, 50)


def test_previous_layout_wins_over_first_fit() -> None:
    candidates = [
        _below("fits", Rect(50, 50, 100, 50)),
        _below("overflows", Rect(250, 100, 100, 50)),
    ]
    chosen = best_fit_geometry(TARGET, candidates, previous_layout_id="overflows")
    assert chosen.id == "overflows"
    assert chosen.preview_rect == Rect(200, 100, 100, 50)
    assert chosen.fits_into(TARGET)


def test_unknown_previous_layout_is_ignored() -> None:
    candidates = [
        _below("a", Rect(250, 100, 100, 50)),
        _below("b", Rect(50, 50, 100, 50)),
    ]
    chosen = best_fit_geometry(TARGET, candidates, previous_layout_id="gone")
    assert chosen is candidates[1]


def test_least_displacement_wins_when_nothing_fits() -> None:
    far = _below("far", Rect(280, 100, 100, 50))
    near = _below("near", Rect(250, 100, 100, 50))
    chosen = best_fit_geometry(TARGET, [far, near])
    assert chosen.id == "near"
    assert chosen.preview_rect == Rect(200, 100, 100, 50)
    assert chosen.fits_into(TARGET)


def test_displacement_tie_keeps_list_order() -> None:
    left = _below("left", Rect(-50, 100, 100, 50))
    right = _below("right", Rect(250, 100, 100, 50))
    chosen = best_fit_geometry(TARGET, [right, left])
    assert chosen.id == "right"


def test_too_large_candidates_are_skipped() -> None:
    huge = _below("huge", Rect(0, 0, 400, 50))
    small = _below("small", Rect(280, 100, 100, 50))
    chosen = best_fit_geometry(TARGET, [huge, small])
    assert chosen.id == "small"
    assert chosen.fits_into(TARGET)


def test_fallback_to_first_when_nothing_can_fit() -> None:
    candidates = [
        _below("first", Rect(0, 0, 400, 400)),
        _below("second", Rect(10, 10, 500, 100)),
    ]
    chosen = best_fit_geometry(Rect(0, 0, 100, 100), candidates)
    assert chosen is candidates[0]


def test_reselecting_with_returned_id_is_stable() -> None:
    candidates = [
        _below("a", Rect(280, 100, 100, 50)),
        _below("b", Rect(250, 100, 100, 50)),
    ]
    first = best_fit_geometry(TARGET, candidates)
    second = best_fit_geometry(TARGET, candidates, previous_layout_id=first.id)
    assert second.id == first.id
    assert second.preview_rect == first.preview_rect


def test_empty_candidate_list_raises() -> None:
    with pytest.raises(ValueError):
        best_fit_geometry(TARGET, [])
