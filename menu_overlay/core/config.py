"""
Central configuration for menu overlay layout.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
SCENARIOS_DIR: str = "docs/scenarios"
REPORTS_DIR: str = "reports"

# ----- Geometry tolerance -----
EPSILON: float = 0.001
"""Tolerance for fit tests and tie-breaking between candidates."""

# ----- Layout constants -----
MENU_SPACING: float = 15.0
"""Gap between preview and menu."""

HORIZONTAL_PADDING: float = 12.0
"""Left/right inset kept free by the compact (phone portrait) strategy."""

PHONE_SHORTEST_SIDE: float = 550.0
"""Viewports whose shortest side is below this are treated as phones."""

COMPACT_MIN_PREVIEW_FRACTION: float = 0.25
"""Compact strategy: smallest preview height as a fraction of viewport height."""

COMPACT_MAX_PREVIEW_FRACTION: float = 0.75
"""Compact strategy: largest preview height as a fraction of viewport height."""

# ----- Menu measuring (text rows) -----
DEFAULT_MENU_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_MENU_FONT_SIZE: float = 14.0
MENU_FONT_FALLBACKS: tuple[str, ...] = ("DejaVuSans.ttf", "Arial.ttf", "arial.ttf")
"""Font files tried after the requested family, before Pillow's built-in font."""

MENU_ROW_HEIGHT: float = 44.0
"""Height of one menu row regardless of font metrics."""

MENU_ROW_PADDING_X: float = 16.0
"""Horizontal padding on each side of a menu row label."""

MENU_MIN_WIDTH: float = 180.0

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 800

# ----- Evaluation sweep -----
SEED: int | None = 42
"""Random seed for synthetic scenarios; None for non-deterministic."""

EVAL_N_SCENARIOS: int = 40
"""Scenarios generated per viewport family."""

EVAL_VIEWPORTS: dict[str, tuple[float, float]] = {
    "phone_portrait": (390.0, 844.0),
    "phone_landscape": (844.0, 390.0),
    "tablet": (820.0, 1180.0),
    "desktop": (1440.0, 900.0),
}
"""Viewport (width, height) per family."""

EVAL_RESIZE_STEPS: int = 5
"""Steps in the resize sequence used for the continuity metric."""

EVAL_RESIZE_FACTOR: float = 0.97
"""Per-step viewport scale in the resize sequence."""

# ----- Debug flags -----
LAYOUT_DEBUG: bool = os.environ.get("LAYOUT_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every candidate the selector inspects. Set env LAYOUT_DEBUG=1 to enable."""
