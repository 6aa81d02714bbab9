"""
Dataclasses for layout input, menu position rules and layout result.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Callable, Literal

from menu_overlay.core.geometry import ZERO_OFFSET, Offset, Rect, Size

if TYPE_CHECKING:
    from menu_overlay.core.candidates import MenuGeometry


class MenuAlignment(str, Enum):
    """Which point of the menu touches the preview. Rendering hint only."""
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    CENTER_LEFT = "center_left"
    CENTER = "center"
    CENTER_RIGHT = "center_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


HorizontalRule = Literal["align_left", "align_right", "after", "before", "fixed"]
VerticalRule = Literal["below", "above", "align_top", "align_bottom"]

MenuMeasure = Callable[[Size], tuple[float, float]]
"""Given loose max constraints, return the menu's concrete size."""


@dataclass(frozen=True)
class MenuPosition:
    """
    Top-left of the menu as a function of the preview rect.

    horizontal:
      align_left   menu.left = preview.left
      align_right  menu.right = preview.right
      after        menu.left = preview.right + spacing
      before       menu.right = preview.left - spacing
      fixed        menu.left = fixed_x (independent of the preview)
    vertical:
      below        menu.top = preview.bottom + spacing
      above        menu.bottom = preview.top - spacing
      align_top    menu.top = preview.top
      align_bottom menu.bottom = preview.bottom
    """
    horizontal: HorizontalRule
    vertical: VerticalRule
    menu_size: Size
    spacing: float = 0.0
    fixed_x: float = 0.0
    correction: Offset = ZERO_OFFSET

    def __call__(self, preview_rect: Rect) -> Offset:
        return menu_offset(self, preview_rect)

    def corrected(self, delta: Offset) -> MenuPosition:
        """Same rule with delta added to every evaluated offset."""
        return replace(self, correction=self.correction + delta)


def menu_offset(position: MenuPosition, preview_rect: Rect) -> Offset:
    """Evaluate a MenuPosition against a preview rect."""
    w, h = position.menu_size
    s = position.spacing
    hr = position.horizontal
    if hr == "align_left":
        x = preview_rect.left
    elif hr == "align_right":
        x = preview_rect.right - w
    elif hr == "after":
        x = preview_rect.right + s
    elif hr == "before":
        x = preview_rect.left - s - w
    else:
        x = position.fixed_x
    vr = position.vertical
    if vr == "below":
        y = preview_rect.bottom + s
    elif vr == "above":
        y = preview_rect.top - s - h
    elif vr == "align_top":
        y = preview_rect.top
    else:
        y = preview_rect.bottom - h
    return Offset(x + position.correction.dx, y + position.correction.dy)


@dataclass(frozen=True)
class MenuLayoutInput:
    """Everything one layout pass needs."""
    layout_menu: MenuMeasure
    bounds: Rect
    primary_item: Rect
    menu_preview_size: Size
    menu_drag_offset: float = 0.0
    previous_layout_id: str | None = None

    def measure_menu(self, max_size: Size) -> Size:
        """Call the measure callback with loose constraints; normalize to Size."""
        measured = self.layout_menu(max_size)
        return Size(float(measured[0]), float(measured[1]))


@dataclass(frozen=True)
class MenuLayout:
    """
    Result of one layout pass. layout_id goes back in as
    previous_layout_id on the next pass.
    """
    layout_id: str
    preview_rect: Rect
    menu_position: MenuPosition
    menu_drag_extent: float
    can_scroll_menu: bool
    menu_alignment: MenuAlignment

    @property
    def menu_rect(self) -> Rect:
        return Rect.from_offset_size(
            self.menu_position(self.preview_rect), self.menu_position.menu_size,
        )

    @property
    def bounds(self) -> Rect:
        return self.preview_rect.expand_to_include(self.menu_rect)


@dataclass
class LayoutReport:
    """
    Layout plus derived metrics and warnings, for JSON/CSV output.
    candidates: the ordered list the layout was selected from (debug views).
    """
    layout: MenuLayout
    strategy: str
    fits_viewport: bool
    min_clearance: float
    preview_scale: float
    warnings: list[str] = field(default_factory=list)
    candidates: list[MenuGeometry] = field(default_factory=list)
