"""
CLI entrypoint: load a scenario (file or flags), lay out the menu, render, export.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from menu_overlay.core.io import (
    Scenario,
    load_scenario,
    parse_rect,
    parse_size,
    scenario_to_dict,
    scenario_to_input,
)
from menu_overlay.core.pipeline import run_layout_report
from menu_overlay.core.render import render_debug, render_layout
from menu_overlay.core.render_svg import export_layout_svg
from menu_overlay.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)
from menu_overlay.core.strategy import (
    CompactStrategy,
    MenuLayoutStrategy,
    StandardStrategy,
    strategy_for_size,
)

STRATEGIES: dict[str, MenuLayoutStrategy] = {
    "standard": StandardStrategy(allow_vertical_attachment=True),
    "standard_horizontal": StandardStrategy(allow_vertical_attachment=False),
    "compact": CompactStrategy(),
}


def _csv_floats(s: str) -> list[float]:
    return [float(p) for p in s.split(",") if p.strip()]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Lay out a context menu next to its preview.")
    p.add_argument("--scenario", type=str, default=None, help="Scenario JSON path (repo-relative)")
    p.add_argument("--viewport", type=str, default="0,0,390,844", help="left,top,width,height")
    p.add_argument("--anchor", type=str, default="150,380,90,40", help="left,top,width,height")
    p.add_argument("--preview-size", type=str, default="200,150", dest="preview_size", help="width,height")
    p.add_argument("--menu-size", type=str, default=None, dest="menu_size", help="width,height")
    p.add_argument("--menu-items", type=str, default="Copy,Share,Delete", dest="menu_items",
                   help="Comma-separated menu rows (used when --menu-size is absent)")
    p.add_argument("--drag-offset", type=float, default=0.0, dest="drag_offset", help="Drag fraction 0..1")
    p.add_argument("--previous-layout-id", type=str, default=None, dest="previous_layout_id")
    p.add_argument("--strategy", choices=["auto", *STRATEGIES], default="auto",
                   help="Force a strategy instead of choosing by viewport size")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default="reports", dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of scenario .json files")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    p.add_argument("--no-images", action="store_false", dest="images", help="Skip PNG/SVG output")
    return p.parse_args(argv)


def _scenario_from_args(args: argparse.Namespace) -> Scenario:
    menu_size = parse_size(_csv_floats(args.menu_size), "--menu-size") if args.menu_size else None
    items = [t.strip() for t in (args.menu_items or "").split(",") if t.strip()]
    if menu_size is None and not items:
        raise ValueError("Give --menu-size or --menu-items")
    return Scenario(
        name=args.run_name,
        viewport=parse_rect(_csv_floats(args.viewport), "--viewport"),
        anchor=parse_rect(_csv_floats(args.anchor), "--anchor"),
        preview_size=parse_size(_csv_floats(args.preview_size), "--preview-size"),
        menu_size=menu_size,
        menu_items=items,
        drag_offset=args.drag_offset,
        previous_layout_id=args.previous_layout_id,
    )


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    if args.batch_dir:
        from menu_overlay.core.batch import run_batch
        batch_dir = Path(args.batch_dir)
        if not batch_dir.is_absolute():
            batch_dir = repo_root / batch_dir
        out = run_batch(
            run_name=args.run_name,
            batch_dir=batch_dir,
            repo_root=repo_root,
            limit=args.batch_limit,
            render_images=args.images,
        )
        print(out / "index.csv")
        return

    if args.scenario:
        scenario = load_scenario(args.scenario, repo_root=repo_root)
        if args.previous_layout_id is not None:
            scenario.previous_layout_id = args.previous_layout_id
        source = args.scenario
    else:
        scenario = _scenario_from_args(args)
        source = "cli"

    layout_input = scenario_to_input(scenario)
    if args.strategy == "auto":
        strategy = strategy_for_size(scenario.viewport.size)
    else:
        strategy = STRATEGIES[args.strategy]
    report = run_layout_report(layout_input, strategy)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_layout_json(report_dir, report),
        write_run_metadata_json(report_dir, args.run_name, source, scenario_to_dict(scenario)),
    ]
    if args.images:
        layout_png = report_dir / "layout.png"
        debug_png = report_dir / "debug.png"
        render_layout(scenario.viewport, scenario.anchor, report.layout, layout_png)
        render_debug(
            scenario.viewport, scenario.anchor,
            report.candidates, report.layout, debug_png,
        )
        paths += [layout_png, debug_png]
        svg_path = export_layout_svg(scenario.viewport, scenario.anchor, report.layout, report_dir / "layout.svg")
        if svg_path is not None:
            paths.append(svg_path)

    for p in paths:
        print(p)
    print("Layout:", report.layout.layout_id, f"({report.strategy})")


if __name__ == "__main__":
    main()
