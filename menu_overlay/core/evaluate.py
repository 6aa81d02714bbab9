"""
Evaluation runner: synthetic scenarios per viewport family (phone portrait,
phone landscape, tablet, desktop). Measures fit rate, clearance, layout id
distribution and continuity under a resize sequence, with and without the
previous layout id fed back.
Saves evaluation_results.csv and evaluation_summary.json under reports/<run_name>/.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import os
from collections import Counter
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from menu_overlay.core.config import (
    EVAL_N_SCENARIOS,
    EVAL_RESIZE_FACTOR,
    EVAL_RESIZE_STEPS,
    EVAL_VIEWPORTS,
    MENU_ROW_HEIGHT,
    SEED,
)
from menu_overlay.core.geometry import Rect, Size
from menu_overlay.core.io import Scenario, scenario_to_input
from menu_overlay.core.pipeline import run_layout_report
from menu_overlay.core.reporting import ensure_report_dir
from menu_overlay.core.strategy import layout_for_input, relayout_sequence
from menu_overlay.core.types import MenuLayoutInput

logger = logging.getLogger(__name__)

RESULT_FIELDS = [
    "family", "name", "strategy", "layout_id", "fits_viewport", "min_clearance",
    "preview_scale", "id_changes_with_continuity", "id_changes_without_continuity",
]


def synthetic_scenarios(family: str, n: int, seed: int | None = SEED) -> list[Scenario]:
    """n random scenarios in the family's viewport. Same seed gives the same list."""
    width, height = EVAL_VIEWPORTS[family]
    rng = np.random.default_rng(seed)
    out: list[Scenario] = []
    for i in range(n):
        aw = float(rng.uniform(40.0, width * 0.5))
        ah = float(rng.uniform(30.0, height * 0.3))
        ax = float(rng.uniform(0.0, width - aw))
        ay = float(rng.uniform(0.0, height - ah))
        zoom = float(rng.uniform(1.0, 2.5))
        rows = int(rng.integers(2, 9))
        out.append(Scenario(
            name=f"{family}_{i:03d}",
            viewport=Rect(0.0, 0.0, width, height),
            anchor=Rect(ax, ay, aw, ah),
            preview_size=Size(aw * zoom, ah * zoom),
            menu_size=Size(float(rng.uniform(150.0, 260.0)), rows * MENU_ROW_HEIGHT),
        ))
    return out


def resize_sequence(
    layout_input: MenuLayoutInput,
    steps: int = EVAL_RESIZE_STEPS,
    factor: float = EVAL_RESIZE_FACTOR,
) -> list[MenuLayoutInput]:
    """Inputs for a window shrinking step by step; the anchor scales with it."""
    out = []
    b, a = layout_input.bounds, layout_input.primary_item
    for k in range(steps):
        s = factor ** k
        out.append(replace(
            layout_input,
            bounds=Rect(b.left, b.top, b.width * s, b.height * s),
            primary_item=Rect(a.left * s, a.top * s, a.width * s, a.height * s),
        ))
    return out


def _id_changes(ids: list[str]) -> int:
    return sum(1 for prev, cur in zip(ids, ids[1:]) if prev != cur)


def evaluate_scenario(scenario: Scenario, family: str) -> dict:
    """Metrics row for one scenario."""
    layout_input = scenario_to_input(scenario)
    report = run_layout_report(layout_input)
    sequence = resize_sequence(layout_input)
    with_continuity = [l.layout_id for l in relayout_sequence(sequence)]
    without_continuity = [layout_for_input(i).layout_id for i in sequence]
    return {
        "family": family,
        "name": scenario.name,
        "strategy": report.strategy,
        "layout_id": report.layout.layout_id,
        "fits_viewport": report.fits_viewport,
        "min_clearance": report.min_clearance,
        "preview_scale": report.preview_scale,
        "id_changes_with_continuity": _id_changes(with_continuity),
        "id_changes_without_continuity": _id_changes(without_continuity),
    }


def summarize(rows: list[dict]) -> dict:
    """Per-family aggregates."""
    by_family: dict[str, list[dict]] = {}
    for r in rows:
        by_family.setdefault(r["family"], []).append(r)
    out: dict = {}
    for family, fam_rows in by_family.items():
        n = len(fam_rows)
        out[family] = {
            "n": n,
            "strategy": Counter(r["strategy"] for r in fam_rows).most_common(1)[0][0],
            "fit_rate": sum(1 for r in fam_rows if r["fits_viewport"]) / n,
            "mean_min_clearance": float(np.mean([r["min_clearance"] for r in fam_rows])),
            "mean_preview_scale": float(np.mean([r["preview_scale"] for r in fam_rows])),
            "stable_rate_with_continuity": sum(1 for r in fam_rows if r["id_changes_with_continuity"] == 0) / n,
            "stable_rate_without_continuity": sum(1 for r in fam_rows if r["id_changes_without_continuity"] == 0) / n,
            "layout_ids": dict(Counter(r["layout_id"] for r in fam_rows)),
        }
    return out


def run_evaluation(
    run_name: str = "eval_01",
    n_scenarios: int = EVAL_N_SCENARIOS,
    seed: int | None = SEED,
    repo_root: Path | None = None,
    families: tuple[str, ...] | None = None,
    make_plots: bool = True,
) -> Path:
    """
    Run the sweep over every family.
    Writes evaluation_results.csv and evaluation_summary.json; returns report_dir.
    """
    root = repo_root or Path.cwd().resolve()
    report_dir = ensure_report_dir(root, run_name)
    rows: list[dict] = []
    for family in families or tuple(EVAL_VIEWPORTS):
        for scenario in synthetic_scenarios(family, n_scenarios, seed):
            rows.append(evaluate_scenario(scenario, family))

    summary = {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "seed": seed,
        "n_cases": len(rows),
        "by_family": summarize(rows),
    }
    (report_dir / "evaluation_summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")
    with open(report_dir / "evaluation_results.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        w.writeheader()
        w.writerows(rows)

    if make_plots:
        from menu_overlay.core.plots import generate_all_plots
        generate_all_plots(report_dir)
    logger.info("Evaluation %s: %d cases -> %s", run_name, len(rows), report_dir)
    return report_dir


def main() -> None:
    p = argparse.ArgumentParser(description="Evaluate menu layout over synthetic viewports.")
    p.add_argument("--run-name", default="eval_01", dest="run_name", help="Reports subdir name")
    p.add_argument("--n-scenarios", type=int, default=EVAL_N_SCENARIOS, dest="n_scenarios",
                   help="Scenarios per viewport family")
    p.add_argument("--seed", type=int, default=SEED)
    p.add_argument("--repo-root", default=None, dest="repo_root")
    p.add_argument("--no-plots", action="store_false", dest="plots")
    args = p.parse_args()
    logging.basicConfig(level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))
    root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    report_dir = run_evaluation(
        run_name=args.run_name,
        n_scenarios=args.n_scenarios,
        seed=args.seed,
        repo_root=root,
        make_plots=args.plots,
    )
    print(report_dir)


if __name__ == "__main__":
    main()
