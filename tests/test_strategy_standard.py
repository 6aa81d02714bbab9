"""
Standard strategy: candidate order, preview shrink, attachment choice.
"""

from __future__ import annotations

import pytest

from menu_overlay.core.geometry import Rect, Size
from menu_overlay.core.strategy_standard import (
    layout_standard,
    standard_candidates,
    standard_preview_size,
)
from menu_overlay.core.text_metrics import fixed_menu_measure
from menu_overlay.core.types import MenuAlignment, MenuLayoutInput

VIEWPORT = Rect(0, 0, 1000, 800)
ANCHOR = Rect(450, 380, 100, 40)
WIDE = Size(300, 100)
TALL = Size(100, 300)


def _input(
    preview: Size = WIDE,
    anchor: Rect = ANCHOR,
    viewport: Rect = VIEWPORT,
    menu: Size = Size(50, 50),
    previous: str | None = None,
) -> MenuLayoutInput:
    return MenuLayoutInput(
        layout_menu=fixed_menu_measure(menu),
        bounds=viewport,
        primary_item=anchor,
        menu_preview_size=preview,
        previous_layout_id=previous,
    )


def test_wide_preview_prefers_vertical() -> None:
    ids = [g.id for g in standard_candidates(_input(WIDE), allow_vertical_attachment=True)]
    assert ids == [
        "vertical-bottom-left",
        "vertical-bottom-right",
        "vertical-top-left",
        "vertical-top-right",
        "horizontal-top-right",
        "horizontal-bottom-right",
        "horizontal-top-left",
        "horizontal-bottom-left",
    ]


def test_tall_and_square_previews_prefer_horizontal() -> None:
    for preview in (TALL, Size(200, 200)):
        ids = [g.id for g in standard_candidates(_input(preview), allow_vertical_attachment=True)]
        assert ids[0] == "horizontal-top-right"
        assert ids[4] == "vertical-bottom-left"
        assert len(ids) == 8


def test_horizontal_only_drops_vertical_candidates() -> None:
    ids = [g.id for g in standard_candidates(_input(WIDE), allow_vertical_attachment=False)]
    assert ids == [
        "horizontal-top-right",
        "horizontal-bottom-right",
        "horizontal-top-left",
        "horizontal-bottom-left",
    ]


def test_candidates_share_preview_centered_on_anchor() -> None:
    geometries = standard_candidates(_input(WIDE), allow_vertical_attachment=True)
    for g in geometries:
        assert g.preview_rect == Rect(350, 350, 300, 100)
        assert g.menu_size == Size(50, 50)


def test_menu_measured_once_with_viewport_size() -> None:
    calls: list[Size] = []

    def measure(max_size: Size) -> tuple[float, float]:
        calls.append(max_size)
        return (50.0, 50.0)

    layout_input = MenuLayoutInput(
        layout_menu=measure,
        bounds=VIEWPORT,
        primary_item=ANCHOR,
        menu_preview_size=WIDE,
    )
    standard_candidates(layout_input, allow_vertical_attachment=True)
    assert calls == [Size(1000, 800)]


def test_preview_shrinks_to_leave_room_for_menu() -> None:
    layout_input = _input(Size(900, 300), viewport=Rect(0, 0, 650, 800))
    out = standard_preview_size(layout_input, Size(50, 50))
    assert out.width == pytest.approx(585)
    assert out.height == pytest.approx(195)


def test_wide_preview_gets_menu_below() -> None:
    layout = layout_standard(_input(WIDE))
    assert layout.layout_id == "vertical-bottom-left"
    assert layout.preview_rect == Rect(350, 350, 300, 100)
    assert layout.menu_rect == Rect(350, 465, 50, 50)
    assert layout.menu_alignment == MenuAlignment.TOP_LEFT
    assert layout.menu_drag_extent == 0.0
    assert layout.can_scroll_menu is True


def test_tall_preview_gets_menu_on_the_right() -> None:
    layout = layout_standard(_input(TALL))
    assert layout.layout_id == "horizontal-top-right"
    assert layout.preview_rect == Rect(450, 250, 100, 300)
    assert layout.menu_rect == Rect(565, 250, 50, 50)


def test_no_room_on_the_right_flips_left() -> None:
    layout = layout_standard(_input(TALL, anchor=Rect(900, 380, 100, 40)))
    assert layout.layout_id == "horizontal-top-left"
    assert layout.menu_rect.left == pytest.approx(835)
    assert layout.menu_alignment == MenuAlignment.TOP_RIGHT


def test_side_menu_near_top_edge_stays_inside_viewport() -> None:
    layout = layout_standard(_input(TALL, anchor=Rect(450, 0, 100, 40)))
    assert layout.layout_id == "horizontal-top-right"
    assert layout.preview_rect == Rect(450, 0, 100, 300)
    assert layout.menu_rect == Rect(565, 0, 50, 50)
    b = layout.bounds
    assert b.left >= VIEWPORT.left and b.top >= VIEWPORT.top
    assert b.right <= VIEWPORT.right and b.bottom <= VIEWPORT.bottom


def test_near_bottom_flips_above() -> None:
    layout = layout_standard(_input(WIDE, anchor=Rect(450, 700, 100, 40)))
    assert layout.layout_id == "vertical-top-left"
    assert layout.menu_rect == Rect(350, 605, 50, 50)


def test_previous_layout_kept_and_shifted() -> None:
    layout = layout_standard(
        _input(WIDE, anchor=Rect(450, 700, 100, 40), previous="vertical-bottom-left"),
    )
    assert layout.layout_id == "vertical-bottom-left"
    assert layout.preview_rect.top == pytest.approx(635)
    assert layout.bounds.bottom == pytest.approx(800)
