"""
Geometry helpers: offsets, sizes, axis-aligned rectangles, size fitting,
conversion to shapely polygons for validation and rendering.
Screen coordinates: x grows right, y grows down.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from shapely.geometry import Polygon, box


class Offset(NamedTuple):
    """Translation or point (dx, dy)."""
    dx: float
    dy: float

    def __add__(self, other: Offset) -> Offset:  # type: ignore[override]
        return Offset(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: Offset) -> Offset:
        return Offset(self.dx - other.dx, self.dy - other.dy)

    def __neg__(self) -> Offset:
        return Offset(-self.dx, -self.dy)

    @property
    def distance_squared(self) -> float:
        return self.dx * self.dx + self.dy * self.dy


ZERO_OFFSET = Offset(0.0, 0.0)


class Size(NamedTuple):
    """Width and height. Plain (w, h) tuples convert with Size(*t)."""
    width: float
    height: float

    @property
    def shortest_side(self) -> float:
        return min(abs(self.width), abs(self.height))

    @property
    def is_portrait(self) -> bool:
        return self.height > self.width

    def inflate(self, delta: float) -> Size:
        return Size(self.width + delta, self.height + delta)

    def fits_within(self, other: Size) -> bool:
        """Both dimensions <= other's."""
        return self.width <= other.width and self.height <= other.height


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle from its top-left corner and size."""
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def from_center(cls, center: Offset, width: float, height: float) -> Rect:
        return cls(center.dx - width / 2.0, center.dy - height / 2.0, width, height)

    @classmethod
    def from_offset_size(cls, offset: Offset, size: Size) -> Rect:
        return cls(offset.dx, offset.dy, size.width, size.height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Offset:
        return Offset(self.left + self.width / 2.0, self.top + self.height / 2.0)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def top_left(self) -> Offset:
        return Offset(self.left, self.top)

    def shift(self, offset: Offset) -> Rect:
        return Rect(self.left + offset.dx, self.top + offset.dy, self.width, self.height)

    def expand_to_include(self, other: Rect) -> Rect:
        """Smallest rectangle containing both."""
        return Rect.from_ltrb(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def with_height(self, height: float) -> Rect:
        return Rect(self.left, self.top, self.width, height)

    def to_polygon(self) -> Polygon:
        """Shapely box for containment tests and drawing."""
        return box(self.left, self.top, self.right, self.bottom)

    def as_tuple(self) -> tuple[float, float, float, float]:
        """(left, top, width, height)."""
        return (self.left, self.top, self.width, self.height)


def fit_size(size: Size, into: Size) -> Size:
    """
    Scale size down uniformly so it fits into `into`; never scales up.
    Scale is clamped at zero so a negative allowance yields an empty size.
    """
    if size.fits_within(into):
        return size
    scales = []
    if size.width > 0:
        scales.append(into.width / size.width)
    if size.height > 0:
        scales.append(into.height / size.height)
    scale = max(0.0, min(scales)) if scales else 1.0
    return Size(size.width * scale, size.height * scale)


def move_into(rect: Rect, bounds: Rect) -> Rect:
    """Shift rect just enough on each axis to sit inside bounds."""
    dx = dy = 0.0
    if rect.left < bounds.left:
        dx += bounds.left - rect.left
    if rect.right > bounds.right:
        dx += bounds.right - rect.right
    if rect.top < bounds.top:
        dy += bounds.top - rect.top
    if rect.bottom > bounds.bottom:
        dy += bounds.bottom - rect.bottom
    return rect.shift(Offset(dx, dy))
