#!/usr/bin/env python3
"""
Generate synthetic layout scenarios as JSON files for batch runs.

One file per scenario, named <family>_<index>.json, covering
every viewport family in EVAL_VIEWPORTS (phone portrait/landscape, tablet, desktop).
Same seed gives the same files.

Usage:
    python scripts/generate_scenarios.py --n 25 --out docs/scenarios/generated
    python -m menu_overlay.core.runner --batch-dir docs/scenarios/generated --run-name synth
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from menu_overlay.core.config import EVAL_VIEWPORTS, SCENARIOS_DIR, SEED
from menu_overlay.core.evaluate import synthetic_scenarios
from menu_overlay.core.io import scenario_to_dict


def save_scenario(out_dir: Path, data: dict) -> Path:
    """Write one scenario JSON file."""
    path = out_dir / f"{data['name']}.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    print(f"Created: {path.name}")
    return path


def main() -> None:
    p = argparse.ArgumentParser(description="Generate synthetic layout scenarios.")
    p.add_argument("--n", type=int, default=10, help="Scenarios per viewport family")
    p.add_argument("--seed", type=int, default=SEED)
    p.add_argument("--out", type=str, default=f"{SCENARIOS_DIR}/generated", help="Output directory")
    args = p.parse_args()

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    total = 0
    for family in EVAL_VIEWPORTS:
        for scenario in synthetic_scenarios(family, args.n, seed=args.seed):
            save_scenario(out_dir, scenario_to_dict(scenario))
            total += 1
    print(f"{total} scenarios in {out_dir}")


if __name__ == "__main__":
    main()
