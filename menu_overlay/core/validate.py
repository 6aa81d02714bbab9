"""
Validate that a layout (preview + menu) lies inside the viewport.
Return (ok, min_clearance) like the report expects.
"""

from __future__ import annotations

from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from menu_overlay.core.config import EPSILON
from menu_overlay.core.geometry import Rect
from menu_overlay.core.types import MenuLayout


def layout_footprint(layout: MenuLayout) -> BaseGeometry:
    """Preview and menu as one shapely geometry; zero-area rects are left out."""
    polys = [
        r.to_polygon() for r in (layout.preview_rect, layout.menu_rect)
        if r.width > 0 and r.height > 0
    ]
    if not polys:
        return Point(layout.preview_rect.center)
    return unary_union(polys)


def rect_contains_with_tol(outer: Rect, geom: BaseGeometry, tolerance: float = EPSILON) -> bool:
    """True if geom is inside outer grown by tolerance on every side."""
    if geom is None or geom.is_empty:
        return False
    grown = outer.to_polygon().buffer(tolerance, join_style="mitre")
    return grown.covers(geom)


def min_clearance(outer: Rect, geom: BaseGeometry) -> float:
    """Smallest distance from geom to the viewport edge; negative when it pokes out."""
    if geom is None or geom.is_empty:
        return 0.0
    minx, miny, maxx, maxy = geom.bounds
    return min(
        minx - outer.left,
        miny - outer.top,
        outer.right - maxx,
        outer.bottom - maxy,
    )


def validate_layout_in_viewport(
    viewport: Rect,
    layout: MenuLayout,
    tolerance: float = EPSILON,
) -> tuple[bool, float]:
    """
    True if preview and menu are fully inside viewport (with tolerance).
    Also returns the minimum clearance to the viewport edge.
    """
    footprint = layout_footprint(layout)
    ok = rect_contains_with_tol(viewport, footprint, tolerance=tolerance)
    return ok, min_clearance(viewport, footprint)
