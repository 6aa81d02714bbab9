"""
Streamlit playground: sidebar sliders for viewport, anchor, preview and menu;
tabs Layout / Debug / Export. Re-runs feed the last layout id back so the
menu keeps its placement while sliders move, like a live resize.

Run from repo root: streamlit run menu_overlay/ui/app.py
"""

from __future__ import annotations

import json
import logging
import os
import sys
import tempfile
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

# Ensure repo root is on path when Streamlit loads this file
_repo_root = Path(__file__).resolve().parent.parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import streamlit as st

from menu_overlay.core.config import EVAL_VIEWPORTS
from menu_overlay.core.error_codes import user_message
from menu_overlay.core.geometry import Rect, Size
from menu_overlay.core.io import Scenario, scenario_to_dict, scenario_to_input
from menu_overlay.core.pipeline import run_layout_report
from menu_overlay.core.render import render_debug, render_layout
from menu_overlay.core.render_svg import layout_svg
from menu_overlay.core.reporting import layout_to_dict
from menu_overlay.core.strategy import strategy_for_size

_PREV_KEY = "previous_layout_id"


def _sidebar() -> tuple[Scenario, bool]:
    """Read inputs from the sidebar. Returns (scenario, keep_continuity)."""
    st.sidebar.header("Viewport")
    preset = st.sidebar.selectbox("Preset", ["custom", *EVAL_VIEWPORTS], index=1)
    default_w, default_h = EVAL_VIEWPORTS.get(preset, (390.0, 844.0))
    vw = st.sidebar.slider("Width", 200, 2000, int(default_w), step=10)
    vh = st.sidebar.slider("Height", 200, 2000, int(default_h), step=10)

    st.sidebar.header("Anchor item")
    aw = st.sidebar.slider("Anchor width", 10, vw - 10, 120)
    ah = st.sidebar.slider("Anchor height", 10, vh - 10, 60)
    ax = st.sidebar.slider("Anchor left", 0, vw - aw, (vw - aw) // 2)
    ay = st.sidebar.slider("Anchor top", 0, vh - ah, (vh - ah) // 2)

    st.sidebar.header("Preview & menu")
    pw = st.sidebar.slider("Preview width", 10, 1500, 200)
    ph = st.sidebar.slider("Preview height", 10, 1500, 150)
    mode = st.sidebar.radio("Menu", ["Fixed size", "Items"], horizontal=True)
    menu_size = None
    items: list[str] = []
    if mode == "Fixed size":
        mw = st.sidebar.slider("Menu width", 50, 600, 200)
        mh = st.sidebar.slider("Menu height", 20, 1200, 180)
        menu_size = Size(float(mw), float(mh))
    else:
        text = st.sidebar.text_area("Menu rows (one per line)", "Copy\nShare\nAdd to favorites\nDelete")
        items = [t.strip() for t in text.splitlines() if t.strip()] or ["Item"]
    drag = st.sidebar.slider("Drag offset", 0.0, 1.0, 0.0, step=0.05)
    keep = st.sidebar.checkbox("Keep previous layout (continuity)", value=True)

    scenario = Scenario(
        name="playground",
        viewport=Rect(0.0, 0.0, float(vw), float(vh)),
        anchor=Rect(float(ax), float(ay), float(aw), float(ah)),
        preview_size=Size(float(pw), float(ph)),
        menu_size=menu_size,
        menu_items=items,
        drag_offset=float(drag),
    )
    return scenario, keep


def main() -> None:
    st.set_page_config(page_title="Menu overlay layout", layout="wide")
    st.title("Menu overlay layout")
    scenario, keep = _sidebar()
    if keep:
        scenario.previous_layout_id = st.session_state.get(_PREV_KEY)
    if st.sidebar.button("Forget previous layout"):
        st.session_state.pop(_PREV_KEY, None)
        scenario.previous_layout_id = None

    layout_input = scenario_to_input(scenario)
    strategy = strategy_for_size(scenario.viewport.size)
    report = run_layout_report(layout_input, strategy)
    st.session_state[_PREV_KEY] = report.layout.layout_id

    st.caption(
        f"**{report.layout.layout_id}** · strategy `{report.strategy}` · "
        f"previous `{scenario.previous_layout_id}`"
    )
    for key in report.warnings:
        st.warning(user_message(key))

    tab_layout, tab_debug, tab_export = st.tabs(["Layout", "Debug", "Export"])
    with tempfile.TemporaryDirectory() as tmp:
        tmp_dir = Path(tmp)
        with tab_layout:
            out = tmp_dir / "layout.png"
            render_layout(scenario.viewport, scenario.anchor, report.layout, out)
            st.image(str(out))
            c1, c2, c3 = st.columns(3)
            c1.metric("Fits viewport", "yes" if report.fits_viewport else "no")
            c2.metric("Min clearance", f"{report.min_clearance:.1f}")
            c3.metric("Preview scale", f"{report.preview_scale:.2f}")
        with tab_debug:
            out = tmp_dir / "debug.png"
            candidates = report.candidates
            render_debug(scenario.viewport, scenario.anchor, candidates, report.layout, out)
            st.image(str(out))
            st.table([
                {"#": i, "id": g.id, "fits": g.fits_into(scenario.viewport)}
                for i, g in enumerate(candidates)
            ])
    with tab_export:
        st.download_button(
            "layout.json",
            json.dumps(layout_to_dict(report), indent=2),
            file_name="layout.json",
            mime="application/json",
        )
        st.download_button(
            "scenario.json",
            json.dumps(scenario_to_dict(scenario), indent=2),
            file_name="scenario.json",
            mime="application/json",
        )
        st.download_button(
            "layout.svg",
            layout_svg(scenario.viewport, scenario.anchor, report.layout),
            file_name="layout.svg",
            mime="image/svg+xml",
        )


main()
