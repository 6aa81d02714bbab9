"""
Create reports/<run_name>/ and write layout.json (stable schema), run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from menu_overlay.core.config import (
    COMPACT_MAX_PREVIEW_FRACTION,
    COMPACT_MIN_PREVIEW_FRACTION,
    EPSILON,
    HORIZONTAL_PADDING,
    MENU_SPACING,
    PHONE_SHORTEST_SIDE,
    REPORTS_DIR,
)
from menu_overlay.core.geometry import Rect
from menu_overlay.core.types import LayoutReport

SCHEMA_VERSION = "1.0"


def _rect_dict(rect: Rect) -> dict:
    return {
        "left": float(rect.left),
        "top": float(rect.top),
        "width": float(rect.width),
        "height": float(rect.height),
    }


def layout_to_dict(report: LayoutReport) -> dict:
    """Exact structure for layout.json."""
    layout = report.layout
    position = layout.menu_position
    return {
        "schema_version": SCHEMA_VERSION,
        "result": {
            "layout_id": layout.layout_id,
            "strategy": report.strategy,
            "preview_rect": _rect_dict(layout.preview_rect),
            "menu_rect": _rect_dict(layout.menu_rect),
            "menu_alignment": layout.menu_alignment.value,
            "menu_drag_extent": layout.menu_drag_extent,
            "can_scroll_menu": layout.can_scroll_menu,
        },
        "menu_position": {
            "horizontal": position.horizontal,
            "vertical": position.vertical,
            "spacing": position.spacing,
            "fixed_x": position.fixed_x,
            "correction": {"dx": position.correction.dx, "dy": position.correction.dy},
        },
        "metrics": {
            "fits_viewport": report.fits_viewport,
            "min_clearance": report.min_clearance,
            "preview_scale": report.preview_scale,
        },
        "warnings": list(report.warnings),
    }


def run_metadata_dict(run_name: str, scenario_source: str, inputs: dict) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "scenario_source": scenario_source,
        "inputs": inputs,
        "config": {
            "EPSILON": EPSILON,
            "MENU_SPACING": MENU_SPACING,
            "HORIZONTAL_PADDING": HORIZONTAL_PADDING,
            "PHONE_SHORTEST_SIDE": PHONE_SHORTEST_SIDE,
            "COMPACT_MIN_PREVIEW_FRACTION": COMPACT_MIN_PREVIEW_FRACTION,
            "COMPACT_MAX_PREVIEW_FRACTION": COMPACT_MAX_PREVIEW_FRACTION,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(report_dir: Path, report: LayoutReport) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    path.write_text(json.dumps(layout_to_dict(report), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    scenario_source: str,
    inputs: dict,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, scenario_source, inputs)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
