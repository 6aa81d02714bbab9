"""
Candidate placement: preview rect + menu position rule, with fit tests and
the shift that moves a candidate inside a target rect.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from menu_overlay.core.config import EPSILON
from menu_overlay.core.geometry import Offset, Rect, Size, move_into
from menu_overlay.core.types import MenuAlignment, MenuPosition


@dataclass(frozen=True)
class MenuGeometry:
    """One possible placement. `id` names the placement kind, not the instance."""
    id: str
    preview_rect: Rect
    menu_size: Size
    menu_position: MenuPosition
    menu_alignment: MenuAlignment

    @property
    def menu_rect(self) -> Rect:
        return Rect.from_offset_size(self.menu_position(self.preview_rect), self.menu_size)

    @property
    def bounds(self) -> Rect:
        """Union of preview and menu."""
        return self.preview_rect.expand_to_include(self.menu_rect)

    @property
    def menu_detached_horizontally(self) -> bool:
        menu = self.menu_rect
        return menu.left > self.preview_rect.right or menu.right < self.preview_rect.left

    def fits_into(self, rect: Rect, epsilon: float = EPSILON) -> bool:
        b = self.bounds
        return (
            b.left + epsilon >= rect.left
            and b.right <= rect.right + epsilon
            and b.top + epsilon >= rect.top
            and b.bottom <= rect.bottom + epsilon
        )

    def fit_into(self, rect: Rect) -> MenuGeometry:
        """
        Shift the candidate just enough to sit inside rect.
        Menu beside the preview: the preview only moves as far as it must to
        sit inside rect itself; the menu takes the rest of the vertical shift.
        """
        if self.menu_detached_horizontally:
            return self._fit_into_horizontal(rect)
        return self._fit_into(rect)

    def _fit_into(self, rect: Rect) -> MenuGeometry:
        b = self.bounds
        dx1 = rect.left - b.left if b.left < rect.left else 0.0
        dx2 = rect.right - b.right if b.right > rect.right else 0.0
        dy1 = rect.top - b.top if b.top < rect.top else 0.0
        dy2 = rect.bottom - b.bottom if b.bottom > rect.bottom else 0.0
        offset = Offset(dx1 + dx2, dy1 + dy2)
        return replace(self, preview_rect=self.preview_rect.shift(offset))

    def _fit_into_horizontal(self, rect: Rect) -> MenuGeometry:
        res = self._fit_into(rect)
        desired = move_into(self.preview_rect, rect)
        correction = Offset(0.0, res.preview_rect.center.dy - desired.center.dy)
        return replace(
            res,
            preview_rect=res.preview_rect.shift(-correction),
            menu_position=res.menu_position.corrected(correction),
        )

