"""
Full layout pass for tooling: choose strategy, lay out, validate against the
viewport, collect warnings. Returns LayoutReport.
"""

from __future__ import annotations

import logging
from typing import Sequence

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.config import EPSILON
from menu_overlay.core.error_codes import (
    NO_CANDIDATE_FITS,
    PREVIEW_SHRUNK,
    UNKNOWN_PREVIOUS_LAYOUT,
)
from menu_overlay.core.strategy import (
    MenuLayoutStrategy,
    build_candidates,
    select_layout,
    strategy_for_size,
)
from menu_overlay.core.types import LayoutReport, MenuLayout, MenuLayoutInput
from menu_overlay.core.validate import validate_layout_in_viewport

logger = logging.getLogger(__name__)


def _preview_scale(layout_input: MenuLayoutInput, layout: MenuLayout) -> float:
    requested = layout_input.menu_preview_size
    if requested.width > 0:
        return layout.preview_rect.width / requested.width
    if requested.height > 0:
        return layout.preview_rect.height / requested.height
    return 1.0


def analyze_layout(
    layout_input: MenuLayoutInput,
    layout: MenuLayout,
    strategy: MenuLayoutStrategy,
    candidates: Sequence[MenuGeometry],
) -> LayoutReport:
    """Metrics and warnings for a finished layout selected from candidates."""
    warnings: list[str] = []
    fits, clearance = validate_layout_in_viewport(layout_input.bounds, layout)
    if not fits:
        warnings.append(NO_CANDIDATE_FITS)
    previous = layout_input.previous_layout_id
    if previous is not None and all(g.id != previous for g in candidates):
        warnings.append(UNKNOWN_PREVIOUS_LAYOUT)
    scale = _preview_scale(layout_input, layout)
    if scale < 1.0 - EPSILON:
        warnings.append(PREVIEW_SHRUNK)
    return LayoutReport(
        layout=layout,
        strategy=strategy.name,
        fits_viewport=fits,
        min_clearance=clearance,
        preview_scale=scale,
        warnings=warnings,
        candidates=list(candidates),
    )


def run_layout_report(
    layout_input: MenuLayoutInput,
    strategy: MenuLayoutStrategy | None = None,
) -> LayoutReport:
    """
    Lay out with the given strategy (default: chosen by viewport size) and analyze.
    Candidates are built once, so the menu is measured once per report.
    """
    if strategy is None:
        strategy = strategy_for_size(layout_input.bounds.size)
    candidates = build_candidates(strategy, layout_input)
    layout = select_layout(strategy, layout_input, candidates)
    report = analyze_layout(layout_input, layout, strategy, candidates)
    if report.warnings:
        logger.info("Layout %s (%s): %s", layout.layout_id, strategy.name, ", ".join(report.warnings))
    return report
