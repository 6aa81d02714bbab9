"""
Standard strategy (desktop, tablet, landscape phone): menu attached at one of
the preview's corners, above/below (vertical) or beside (horizontal).
"""

from __future__ import annotations

import logging
from typing import Sequence

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.config import MENU_SPACING
from menu_overlay.core.geometry import Rect, Size, fit_size
from menu_overlay.core.selection import best_fit_geometry
from menu_overlay.core.types import (
    MenuAlignment,
    MenuLayout,
    MenuLayoutInput,
    MenuPosition,
)

logger = logging.getLogger(__name__)

# (id, horizontal rule, vertical rule, alignment)
_VERTICAL = (
    ("vertical-bottom-left", "align_left", "below", MenuAlignment.TOP_LEFT),
    ("vertical-bottom-right", "align_right", "below", MenuAlignment.TOP_RIGHT),
    ("vertical-top-left", "align_left", "above", MenuAlignment.BOTTOM_LEFT),
    ("vertical-top-right", "align_right", "above", MenuAlignment.BOTTOM_RIGHT),
)
_HORIZONTAL = (
    ("horizontal-top-right", "after", "align_top", MenuAlignment.TOP_LEFT),
    ("horizontal-bottom-right", "after", "align_bottom", MenuAlignment.BOTTOM_LEFT),
    ("horizontal-top-left", "before", "align_top", MenuAlignment.TOP_RIGHT),
    ("horizontal-bottom-left", "before", "align_bottom", MenuAlignment.BOTTOM_RIGHT),
)


def _build(specs: tuple, preview_rect: Rect, menu_size: Size) -> list[MenuGeometry]:
    return [
        MenuGeometry(
            id=layout_id,
            preview_rect=preview_rect,
            menu_size=menu_size,
            menu_position=MenuPosition(h, v, menu_size, spacing=MENU_SPACING),
            menu_alignment=alignment,
        )
        for layout_id, h, v, alignment in specs
    ]


def standard_preview_size(layout_input: MenuLayoutInput, menu_size: Size) -> Size:
    """Requested preview size shrunk to leave room for the menu beside it."""
    space = Size(
        layout_input.bounds.width - menu_size.width - MENU_SPACING,
        layout_input.bounds.height,
    )
    return fit_size(layout_input.menu_preview_size, space)


def standard_candidates(
    layout_input: MenuLayoutInput,
    allow_vertical_attachment: bool,
) -> list[MenuGeometry]:
    """Ordered candidates: vertical first for wide previews when allowed."""
    menu_size = layout_input.measure_menu(layout_input.bounds.size)
    preview_size = standard_preview_size(layout_input, menu_size)
    preview_rect = Rect.from_center(
        layout_input.primary_item.center, preview_size.width, preview_size.height,
    )
    vertical = _build(_VERTICAL, preview_rect, menu_size)
    horizontal = _build(_HORIZONTAL, preview_rect, menu_size)

    requested = layout_input.menu_preview_size
    if allow_vertical_attachment and requested.width > requested.height:
        return vertical + horizontal
    if allow_vertical_attachment:
        return horizontal + vertical
    return horizontal


def select_standard(layout_input: MenuLayoutInput, geometries: Sequence[MenuGeometry]) -> MenuLayout:
    """Pick among candidates already built by standard_candidates."""
    geometry = best_fit_geometry(
        layout_input.bounds, geometries, layout_input.previous_layout_id,
    )
    logger.debug("Standard layout chose %s", geometry.id)
    return MenuLayout(
        layout_id=geometry.id,
        preview_rect=geometry.preview_rect,
        menu_position=geometry.menu_position,
        menu_drag_extent=0.0,
        can_scroll_menu=True,
        menu_alignment=geometry.menu_alignment,
    )


def layout_standard(
    layout_input: MenuLayoutInput,
    allow_vertical_attachment: bool = True,
) -> MenuLayout:
    return select_standard(layout_input, standard_candidates(layout_input, allow_vertical_attachment))
