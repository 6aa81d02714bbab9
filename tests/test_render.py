"""
PNG and SVG output: files are written and carry the chosen layout.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from menu_overlay.core.geometry import Rect, Size
from menu_overlay.core.render import render_debug, render_layout
from menu_overlay.core.render_svg import SVG_NS, export_layout_svg, layout_svg
from menu_overlay.core.strategy import CompactStrategy, build_candidates, run_layout
from menu_overlay.core.text_metrics import fixed_menu_measure
from menu_overlay.core.types import MenuLayoutInput

VIEWPORT = Rect(0, 0, 400, 800)
ANCHOR = Rect(150, 380, 50, 40)


@pytest.fixture
def layout_input() -> MenuLayoutInput:
    return MenuLayoutInput(
        layout_menu=fixed_menu_measure(Size(180, 60)),
        bounds=VIEWPORT,
        primary_item=ANCHOR,
        menu_preview_size=Size(200, 150),
    )


def test_render_layout_png(tmp_path: Path, layout_input: MenuLayoutInput) -> None:
    layout = run_layout(CompactStrategy(), layout_input)
    out = tmp_path / "layout.png"
    render_layout(VIEWPORT, ANCHOR, layout, out, width_px=200, height_px=200)
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_debug_png(tmp_path: Path, layout_input: MenuLayoutInput) -> None:
    strategy = CompactStrategy()
    layout = run_layout(strategy, layout_input)
    out = tmp_path / "debug.png"
    render_debug(VIEWPORT, ANCHOR, build_candidates(strategy, layout_input), layout, out,
                 width_px=300, height_px=300)
    assert out.exists()
    assert out.stat().st_size > 0


def test_layout_svg_elements(layout_input: MenuLayoutInput) -> None:
    layout = run_layout(CompactStrategy(), layout_input)
    root = ET.fromstring(layout_svg(VIEWPORT, ANCHOR, layout))
    ns = {"svg": SVG_NS}
    rects = {r.get("id"): r for r in root.findall("svg:rect", ns)}
    assert set(rects) == {"viewport", "anchor", "preview", "menu"}
    menu = rects["menu"]
    assert float(menu.get("x")) == pytest.approx(75)
    assert float(menu.get("y")) == pytest.approx(490)
    assert menu.get("data-layout-id") == "bottom-left"
    assert root.find("svg:text", ns).text == "bottom-left"


def test_export_layout_svg(tmp_path: Path, layout_input: MenuLayoutInput) -> None:
    layout = run_layout(CompactStrategy(), layout_input)
    path = export_layout_svg(VIEWPORT, ANCHOR, layout, tmp_path / "layout.svg")
    assert path is not None
    assert path.read_text(encoding="utf-8").startswith("<?xml")


def test_export_layout_svg_unwritable(tmp_path: Path, layout_input: MenuLayoutInput) -> None:
    layout = run_layout(CompactStrategy(), layout_input)
    assert export_layout_svg(VIEWPORT, ANCHOR, layout, tmp_path / "missing" / "layout.svg") is None
