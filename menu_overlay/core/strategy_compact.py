"""
Compact strategy (phone portrait): preview stays where the item is, clamped
horizontally only; menu goes below it unless only the space above is enough.
Menu is left-aligned, right-aligned or centered in the viewport.
"""

from __future__ import annotations

import logging
from typing import Sequence

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.config import (
    COMPACT_MAX_PREVIEW_FRACTION,
    COMPACT_MIN_PREVIEW_FRACTION,
    HORIZONTAL_PADDING,
    MENU_SPACING,
)
from menu_overlay.core.geometry import Rect, Size, fit_size
from menu_overlay.core.selection import best_fit_geometry
from menu_overlay.core.types import (
    MenuAlignment,
    MenuLayout,
    MenuLayoutInput,
    MenuPosition,
)

logger = logging.getLogger(__name__)

# Drag-to-resize is switched off: the menu never overflows the viewport and
# the drag offset has no effect on the preview size.
MENU_OVERFLOW: float = 0.0


def clamp_horizontally(rect: Rect, bounds: Rect, padding: float = HORIZONTAL_PADDING) -> Rect:
    """Keep rect inside bounds' padded horizontal span; top is untouched."""
    left = rect.left
    if left < bounds.left + padding:
        left = bounds.left + padding
    elif rect.right > bounds.right - padding:
        left = bounds.right - padding - rect.width
    return Rect(left, rect.top, rect.width, rect.height)


def prefers_bottom(preview_rect: Rect, bounds: Rect, menu_height: float) -> bool:
    """Below unless below is short, above is roomier and above is enough."""
    space_above = preview_rect.top - bounds.top
    space_below = bounds.bottom - preview_rect.bottom
    needed = menu_height + MENU_SPACING
    return space_below >= needed or space_below >= space_above or space_above < needed


def _within_padding(left: float, width: float, bounds: Rect) -> bool:
    return (
        left >= bounds.left + HORIZONTAL_PADDING
        and left + width <= bounds.right - HORIZONTAL_PADDING
    )


def _build_geometries(
    preview_rect: Rect,
    menu_size: Size,
    bounds: Rect,
    prefer_bottom: bool,
) -> list[MenuGeometry]:
    left_fits = _within_padding(preview_rect.left, menu_size.width, bounds)
    right_fits = _within_padding(preview_rect.right - menu_size.width, menu_size.width, bounds)
    center_x = (bounds.left + bounds.right) / 2.0 - menu_size.width / 2.0

    def make(layout_id: str, horizontal: str, vertical: str, alignment: MenuAlignment) -> MenuGeometry:
        return MenuGeometry(
            id=layout_id,
            preview_rect=preview_rect,
            menu_size=menu_size,
            menu_position=MenuPosition(
                horizontal, vertical, menu_size, spacing=MENU_SPACING, fixed_x=center_x,
            ),
            menu_alignment=alignment,
        )

    bottom: list[MenuGeometry] = []
    top: list[MenuGeometry] = []
    if left_fits:
        bottom.append(make("bottom-left", "align_left", "below", MenuAlignment.TOP_LEFT))
    if right_fits:
        bottom.append(make("bottom-right", "align_right", "below", MenuAlignment.TOP_RIGHT))
    bottom.append(make("bottom-center", "fixed", "below", MenuAlignment.TOP_CENTER))

    if left_fits:
        top.append(make("top-left", "align_left", "above", MenuAlignment.BOTTOM_LEFT))
    if right_fits:
        top.append(make("top-right", "align_right", "above", MenuAlignment.BOTTOM_RIGHT))
    top.append(make("top-center", "fixed", "above", MenuAlignment.BOTTOM_CENTER))

    return bottom + top if prefer_bottom else top + bottom


def compact_candidates(layout_input: MenuLayoutInput) -> list[MenuGeometry]:
    """Ordered candidates, preferred direction first."""
    bounds = layout_input.bounds
    requested = layout_input.menu_preview_size
    preview_min = fit_size(requested, Size(bounds.width, bounds.height * COMPACT_MIN_PREVIEW_FRACTION))
    preview_max = fit_size(requested, Size(bounds.width, bounds.height * COMPACT_MAX_PREVIEW_FRACTION))

    menu_size = layout_input.measure_menu(
        Size(
            bounds.width - HORIZONTAL_PADDING * 2,
            bounds.height - preview_min.height - MENU_SPACING,
        )
    )

    drag = layout_input.menu_drag_offset * MENU_OVERFLOW
    preview_size = fit_size(requested, Size(bounds.width, preview_max.height - drag))
    preview_rect = Rect.from_center(
        layout_input.primary_item.center, preview_size.width, preview_size.height,
    )
    preview_rect = clamp_horizontally(preview_rect, bounds)

    prefer_bottom = prefers_bottom(preview_rect, bounds, menu_size.height)
    return _build_geometries(preview_rect, menu_size, bounds, prefer_bottom)


def select_compact(layout_input: MenuLayoutInput, geometries: Sequence[MenuGeometry]) -> MenuLayout:
    """Pick among candidates already built by compact_candidates."""
    target = layout_input.bounds.with_height(layout_input.bounds.height + MENU_OVERFLOW)
    geometry = best_fit_geometry(target, geometries, layout_input.previous_layout_id)
    logger.debug("Compact layout chose %s", geometry.id)
    return MenuLayout(
        layout_id=geometry.id,
        preview_rect=geometry.preview_rect,
        menu_position=geometry.menu_position,
        menu_drag_extent=MENU_OVERFLOW,
        can_scroll_menu=MENU_OVERFLOW == 0.0 or layout_input.menu_drag_offset == 1.0,
        menu_alignment=geometry.menu_alignment,
    )


def layout_compact(layout_input: MenuLayoutInput) -> MenuLayout:
    return select_compact(layout_input, compact_candidates(layout_input))
