"""
MenuGeometry: menu rect, bounds, fit test with tolerance, shift-to-fit,
and the vertical anchoring when the menu sits beside the preview.
"""

from __future__ import annotations

import pytest

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.geometry import Offset, Rect, Size
from menu_overlay.core.types import MenuAlignment, MenuPosition, menu_offset


def _geometry(preview: Rect, menu: Size, horizontal: str, vertical: str, id: str = "g") -> MenuGeometry:
    return MenuGeometry(
        id=id,
        preview_rect=preview,
        menu_size=menu,
        menu_position=MenuPosition(horizontal, vertical, menu, spacing=15.0),
        menu_alignment=MenuAlignment.TOP_LEFT,
    )


def test_menu_position_rules() -> None:
    p = Rect(100, 100, 200, 100)
    size = Size(50, 40)
    assert menu_offset(MenuPosition("align_left", "below", size, 15.0), p) == Offset(100, 215)
    assert menu_offset(MenuPosition("align_right", "above", size, 15.0), p) == Offset(250, 45)
    assert menu_offset(MenuPosition("after", "align_top", size, 15.0), p) == Offset(315, 100)
    assert menu_offset(MenuPosition("before", "align_bottom", size, 15.0), p) == Offset(35, 160)
    fixed = MenuPosition("fixed", "below", size, 15.0, fixed_x=7.0)
    assert menu_offset(fixed, p) == Offset(7, 215)


def test_menu_position_follows_preview_shift() -> None:
    pos = MenuPosition("align_left", "below", Size(50, 40), 15.0)
    p = Rect(100, 100, 200, 100)
    moved = pos(p.shift(Offset(10, -20)))
    assert moved == pos(p) + Offset(10, -20)


def test_menu_rect_and_bounds() -> None:
    g = _geometry(Rect(100, 100, 200, 100), Size(50, 50), "align_left", "below")
    assert g.menu_rect == Rect(100, 215, 50, 50)
    assert g.bounds == Rect.from_ltrb(100, 100, 300, 265)


def test_fits_into_uses_tolerance() -> None:
    g = _geometry(Rect(100, 100, 200, 100), Size(50, 50), "align_left", "below")
    assert g.fits_into(Rect.from_ltrb(100, 100, 300, 265))
    assert g.fits_into(Rect.from_ltrb(100.0005, 100.0005, 299.9995, 264.9995))
    assert not g.fits_into(Rect.from_ltrb(100, 100, 299.99, 265))
    assert not g.fits_into(Rect.from_ltrb(100.01, 100, 300, 265))


def test_fit_into_shifts_minimally() -> None:
    g = _geometry(Rect(100, 100, 200, 100), Size(50, 50), "align_left", "below")
    fitted = g.fit_into(Rect(0, 0, 400, 250))
    assert fitted.preview_rect == Rect(100, 85, 200, 100)
    assert fitted.fits_into(Rect(0, 0, 400, 250))
    assert fitted.id == g.id
    assert fitted.menu_position == g.menu_position


def test_fit_into_both_axes() -> None:
    g = _geometry(Rect(-20, 100, 200, 100), Size(50, 50), "align_left", "below")
    fitted = g.fit_into(Rect(0, 0, 400, 250))
    assert fitted.preview_rect.left == pytest.approx(0)
    assert fitted.preview_rect.top == pytest.approx(85)


def test_fit_into_noop_when_already_inside() -> None:
    g = _geometry(Rect(100, 100, 200, 100), Size(50, 50), "align_left", "below")
    assert g.fit_into(Rect(0, 0, 1000, 1000)) == g


def test_detached_menu_keeps_preview_vertical_position() -> None:
    # Menu beside the preview, taller than the space below: only the menu moves up.
    g = _geometry(Rect(100, 100, 100, 100), Size(80, 150), "after", "align_top")
    assert g.menu_detached_horizontally
    target = Rect(0, 0, 400, 200)
    fitted = g.fit_into(target)
    assert fitted.preview_rect == Rect(100, 100, 100, 100)
    assert fitted.menu_rect == Rect(215, 50, 80, 150)
    assert fitted.fits_into(target)


def test_detached_menu_still_moves_horizontally() -> None:
    g = _geometry(Rect(100, 100, 100, 100), Size(80, 150), "after", "align_top")
    fitted = g.fit_into(Rect(150, 0, 400, 200))
    assert fitted.preview_rect.left == pytest.approx(150)
    assert fitted.preview_rect.top == pytest.approx(100)
    assert fitted.menu_rect.left == pytest.approx(265)
    assert fitted.menu_rect.top == pytest.approx(50)


def test_detached_menu_preview_outside_vertically_is_pulled_in() -> None:
    # Preview pokes out of the top; only the preview's own overflow moves it.
    g = _geometry(Rect(100, -20, 100, 100), Size(80, 150), "after", "align_bottom")
    assert g.menu_detached_horizontally
    target = Rect(0, 0, 400, 200)
    fitted = g.fit_into(target)
    assert fitted.preview_rect.top == pytest.approx(0)
    assert fitted.preview_rect.left == pytest.approx(100)
    assert fitted.menu_rect.top == pytest.approx(0)
    assert fitted.menu_rect.left == pytest.approx(215)
    assert fitted.fits_into(target)


def test_overlapping_menu_is_not_detached() -> None:
    g = _geometry(Rect(100, 100, 200, 100), Size(50, 50), "align_right", "above")
    assert not g.menu_detached_horizontally
