"""
Load and validate layout scenarios from JSON.

A scenario names a viewport, an anchor item, the requested preview size and
the menu, either as a fixed "menu_size" or as "menu_items" text rows:

    {
      "name": "phone_portrait",
      "viewport": [0, 0, 390, 844],
      "anchor": [150, 380, 50, 40],
      "preview_size": [200, 150],
      "menu_size": [180, 60],
      "drag_offset": 0.0,
      "previous_layout_id": null
    }

Rects are [left, top, width, height] or {"left", "top", "width", "height"}.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from menu_overlay.core.config import DEFAULT_MENU_FONT_FAMILY, DEFAULT_MENU_FONT_SIZE
from menu_overlay.core.geometry import Rect, Size
from menu_overlay.core.text_metrics import fixed_menu_measure, menu_measure_for_items
from menu_overlay.core.types import MenuLayoutInput


@dataclass
class Scenario:
    """One layout case as read from disk."""
    name: str
    viewport: Rect
    anchor: Rect
    preview_size: Size
    menu_size: Size | None = None
    menu_items: list[str] = field(default_factory=list)
    font_family: str = DEFAULT_MENU_FONT_FAMILY
    font_size: float = DEFAULT_MENU_FONT_SIZE
    drag_offset: float = 0.0
    previous_layout_id: str | None = None


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _numbers(value: Any, n: int, what: str) -> list[float]:
    if not isinstance(value, (list, tuple)) or len(value) != n:
        raise ValueError(f"{what} must be a list of {n} numbers, got {value!r}")
    try:
        out = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"{what} must contain numbers, got {value!r}") from e
    if not all(math.isfinite(v) for v in out):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return out


def parse_rect(value: Any, what: str = "rect") -> Rect:
    if isinstance(value, dict):
        try:
            value = [value["left"], value["top"], value["width"], value["height"]]
        except KeyError as e:
            raise ValueError(f"{what} is missing {e.args[0]!r}") from e
    left, top, width, height = _numbers(value, 4, what)
    if width < 0 or height < 0:
        raise ValueError(f"{what} has negative size: {width}x{height}")
    return Rect(left, top, width, height)


def parse_size(value: Any, what: str = "size") -> Size:
    if isinstance(value, dict):
        try:
            value = [value["width"], value["height"]]
        except KeyError as e:
            raise ValueError(f"{what} is missing {e.args[0]!r}") from e
    width, height = _numbers(value, 2, what)
    if width < 0 or height < 0:
        raise ValueError(f"{what} has negative size: {width}x{height}")
    return Size(width, height)


def parse_scenario(data: dict, default_name: str = "scenario") -> Scenario:
    """
    Build a Scenario from a decoded JSON object.
    Raises ValueError when a field is missing or malformed.
    """
    if not isinstance(data, dict):
        raise ValueError("Scenario must be a JSON object")
    for key in ("viewport", "anchor", "preview_size"):
        if key not in data:
            raise ValueError(f"Scenario is missing {key!r}")
    menu_size = parse_size(data["menu_size"], "menu_size") if data.get("menu_size") is not None else None
    items = [str(t) for t in data.get("menu_items") or []]
    if menu_size is None and not items:
        raise ValueError("Scenario needs 'menu_size' or 'menu_items'")
    previous = data.get("previous_layout_id")
    return Scenario(
        name=str(data.get("name") or default_name),
        viewport=parse_rect(data["viewport"], "viewport"),
        anchor=parse_rect(data["anchor"], "anchor"),
        preview_size=parse_size(data["preview_size"], "preview_size"),
        menu_size=menu_size,
        menu_items=items,
        font_family=str(data.get("font_family") or DEFAULT_MENU_FONT_FAMILY),
        font_size=float(data.get("font_size") or DEFAULT_MENU_FONT_SIZE),
        drag_offset=float(data.get("drag_offset") or 0.0),
        previous_layout_id=str(previous) if previous is not None else None,
    )


def load_scenario(path: str | Path, repo_root: Path | None = None) -> Scenario:
    """
    Load a scenario JSON file.
    Raises FileNotFoundError if path is missing, ValueError if content is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Scenario file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {resolved.name}: {e}") from e
    return parse_scenario(data, default_name=resolved.stem)


def scenario_to_dict(scenario: Scenario) -> dict:
    """Inverse of parse_scenario (for writing generated scenarios)."""
    out: dict[str, Any] = {
        "name": scenario.name,
        "viewport": list(scenario.viewport.as_tuple()),
        "anchor": list(scenario.anchor.as_tuple()),
        "preview_size": list(scenario.preview_size),
        "drag_offset": scenario.drag_offset,
        "previous_layout_id": scenario.previous_layout_id,
    }
    if scenario.menu_size is not None:
        out["menu_size"] = list(scenario.menu_size)
    if scenario.menu_items:
        out["menu_items"] = list(scenario.menu_items)
        out["font_family"] = scenario.font_family
        out["font_size"] = scenario.font_size
    return out


def scenario_to_input(scenario: Scenario) -> MenuLayoutInput:
    """Layout input with a measure callback for the scenario's menu."""
    if scenario.menu_size is not None:
        measure = fixed_menu_measure(scenario.menu_size)
    else:
        measure = menu_measure_for_items(scenario.menu_items, scenario.font_family, scenario.font_size)
    return MenuLayoutInput(
        layout_menu=measure,
        bounds=scenario.viewport,
        primary_item=scenario.anchor,
        menu_preview_size=scenario.preview_size,
        menu_drag_offset=scenario.drag_offset,
        previous_layout_id=scenario.previous_layout_id,
    )
