"""
Measure menu row labels with Pillow and build menu-measure callbacks.
1 px = 1 layout unit.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from menu_overlay.core.config import (
    DEFAULT_MENU_FONT_FAMILY,
    DEFAULT_MENU_FONT_SIZE,
    MENU_FONT_FALLBACKS,
    MENU_MIN_WIDTH,
    MENU_ROW_HEIGHT,
    MENU_ROW_PADDING_X,
)
from menu_overlay.core.geometry import Size
from menu_overlay.core.types import MenuMeasure

logger = logging.getLogger(__name__)


def font_files_for(font_family: str) -> list[str]:
    """File names tried for a family: "DejaVu Sans.ttf", "DejaVuSans.ttf", then fallbacks."""
    names = [f"{font_family}.ttf", f"{font_family.replace(' ', '')}.ttf"]
    return names + [n for n in MENU_FONT_FALLBACKS if n not in names]


@lru_cache(maxsize=32)
def menu_font(font_family: str, pixel_size: int):
    """Font for menu labels; Pillow's built-in font when no file resolves."""
    for name in font_files_for(font_family):
        try:
            return ImageFont.truetype(name, size=pixel_size)
        except OSError:
            continue
    logger.warning("No font file for %r; measuring menu labels with Pillow's default font", font_family)
    return ImageFont.load_default()


def measure_text(text: str, font_family: str, font_size: float) -> tuple[float, float]:
    """Return (width, height) of a label rendered at font_size."""
    font = menu_font(font_family, max(1, round(font_size)))
    left, top, right, bottom = ImageDraw.Draw(Image.new("L", (1, 1))).textbbox((0, 0), text, font=font)
    # The built-in bitmap font may ignore the requested size.
    scale = font_size / max(1.0, float(getattr(font, "size", font_size)))
    return ((right - left) * scale, (bottom - top) * scale)


def natural_menu_size(
    items: Sequence[str],
    font_family: str = DEFAULT_MENU_FONT_FAMILY,
    font_size: float = DEFAULT_MENU_FONT_SIZE,
) -> Size:
    """Widest label plus padding (at least MENU_MIN_WIDTH) by one row per item."""
    widest = max((measure_text(t, font_family, font_size)[0] for t in items), default=0.0)
    width = max(MENU_MIN_WIDTH, widest + 2 * MENU_ROW_PADDING_X)
    return Size(width, MENU_ROW_HEIGHT * len(items))


def _clamp_to(size: Size, max_size: Size) -> Size:
    return Size(
        max(0.0, min(size.width, max_size.width)),
        max(0.0, min(size.height, max_size.height)),
    )


def fixed_menu_measure(size: Size) -> MenuMeasure:
    """Callback for a menu of known size; loose constraints still cap it (menu scrolls)."""
    size = Size(*size)

    def measure(max_size: Size) -> Size:
        return _clamp_to(size, Size(*max_size))

    return measure


def menu_measure_for_items(
    items: Sequence[str],
    font_family: str = DEFAULT_MENU_FONT_FAMILY,
    font_size: float = DEFAULT_MENU_FONT_SIZE,
) -> MenuMeasure:
    """Callback that sizes a text menu; rows are measured once, up front."""
    return fixed_menu_measure(natural_menu_size(items, font_family, font_size))
