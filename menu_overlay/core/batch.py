"""
Batch mode: lay out every scenario in a directory of .json files.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/ with layout.json, images.
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path

from menu_overlay.core.config import REPORTS_DIR
from menu_overlay.core.error_codes import RUN_FAILED, SCENARIO_INVALID
from menu_overlay.core.io import load_scenario, scenario_to_dict, scenario_to_input
from menu_overlay.core.pipeline import run_layout_report
from menu_overlay.core.render import render_debug, render_layout
from menu_overlay.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json

logger = logging.getLogger(__name__)

INDEX_FIELDS = [
    "case_id", "scenario_source", "strategy", "layout_id", "fits_viewport",
    "min_clearance", "preview_scale", "duration_ms", "warnings", "error",
]


def _error_row(case_id: str, source: str, error: str, t0: float) -> dict:
    return {
        "case_id": case_id, "scenario_source": source, "strategy": "", "layout_id": "",
        "fits_viewport": "", "min_clearance": "", "preview_scale": "",
        "duration_ms": int((time.perf_counter() - t0) * 1000), "warnings": "", "error": error,
    }


def run_batch(
    run_name: str,
    batch_dir: Path,
    repo_root: Path,
    limit: int | None = None,
    render_images: bool = True,
) -> Path:
    """Lay out all scenarios in batch_dir. Returns path to batch report dir."""
    report_dir = ensure_report_dir(repo_root, f"batch_{run_name}", output_dir=REPORTS_DIR)
    cases_dir = report_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)
    files = sorted(batch_dir.glob("*.json"))[: (limit or 999)]
    rows: list[dict] = []
    for i, path in enumerate(files):
        case_id = f"case_{i:04d}_{path.stem}"
        source = str(path.relative_to(repo_root)) if repo_root in path.parents else str(path)
        t0 = time.perf_counter()
        try:
            scenario = load_scenario(path)
        except ValueError as e:
            logger.warning("Skipping %s: %s", path.name, e)
            rows.append(_error_row(case_id, source, SCENARIO_INVALID, t0))
            continue
        layout_input = scenario_to_input(scenario)
        try:
            report = run_layout_report(layout_input)
        except Exception:
            logger.exception("Layout failed for %s", path.name)
            rows.append(_error_row(case_id, source, RUN_FAILED, t0))
            continue
        duration_ms = int((time.perf_counter() - t0) * 1000)

        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        write_layout_json(case_dir, report)
        write_run_metadata_json(case_dir, run_name, source, scenario_to_dict(scenario))
        if render_images:
            render_layout(scenario.viewport, scenario.anchor, report.layout, case_dir / "layout.png")
            render_debug(
                scenario.viewport, scenario.anchor, report.candidates, report.layout,
                case_dir / "debug.png",
            )
        rows.append({
            "case_id": case_id, "scenario_source": source, "strategy": report.strategy,
            "layout_id": report.layout.layout_id, "fits_viewport": report.fits_viewport,
            "min_clearance": round(report.min_clearance, 2),
            "preview_scale": round(report.preview_scale, 3),
            "duration_ms": duration_ms, "warnings": ";".join(report.warnings), "error": "",
        })

    index_path = report_dir / "index.csv"
    with open(index_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    logger.info("Batch %s: %d cases -> %s", run_name, len(rows), index_path)
    return report_dir
