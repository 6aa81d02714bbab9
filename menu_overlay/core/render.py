"""
Matplotlib PNG rendering: layout.png (viewport, anchor, preview, menu) and
debug.png (every candidate outlined, chosen one filled).
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from menu_overlay.core.geometry import Rect
from menu_overlay.core.types import MenuLayout


def set_axes_to_rect(ax: plt.Axes, rect: Rect, pad_frac: float = 0.05) -> None:
    """Set limits from rect with margin; y grows down; equal aspect; hide axes."""
    dx = max(1.0, rect.width * pad_frac)
    dy = max(1.0, rect.height * pad_frac)
    ax.set_xlim(rect.left - dx, rect.right + dx)
    ax.set_ylim(rect.bottom + dy, rect.top - dy)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])
    ax.axis("off")
    return fig, ax


def _draw_rect(ax: plt.Axes, rect: Rect, **kwargs) -> None:
    ax.add_patch(Rectangle((rect.left, rect.top), rect.width, rect.height, **kwargs))


def _save(fig: plt.Figure, output_path: str | Path, **kwargs) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white", **kwargs)
    plt.close(fig)


def _draw_layout(ax: plt.Axes, viewport: Rect, anchor: Rect, layout: MenuLayout) -> None:
    _draw_rect(ax, viewport, facecolor="#f4f4f4", edgecolor="black", linewidth=1.5, zorder=1)
    _draw_rect(ax, anchor, facecolor="none", edgecolor="grey", linestyle=":", linewidth=1, zorder=2)
    _draw_rect(ax, layout.preview_rect, facecolor="#9ecae1", edgecolor="navy", linewidth=1.5, zorder=3)
    _draw_rect(ax, layout.menu_rect, facecolor="white", edgecolor="black", linewidth=1.5, zorder=4)
    menu = layout.menu_rect
    ax.text(
        menu.center.dx, menu.center.dy, layout.layout_id,
        ha="center", va="center", fontsize=8, zorder=5,
    )


def render_layout(
    viewport: Rect,
    anchor: Rect,
    layout: MenuLayout,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render the chosen layout. scale multiplies output resolution (1x, 2x, 4x)."""
    fig, ax = _new_fig(width_px * scale, height_px * scale)
    _draw_layout(ax, viewport, anchor, layout)
    set_axes_to_rect(ax, viewport.expand_to_include(layout.bounds))
    _save(fig, output_path)


def render_debug(
    viewport: Rect,
    anchor: Rect,
    candidates: list[MenuGeometry],
    layout: MenuLayout,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Chosen layout plus every candidate's menu outline, numbered by preference."""
    w, h = width_px * scale, height_px * scale
    fig = plt.figure(figsize=(w / 100.0, h / 100.0), dpi=100, constrained_layout=False)
    # Leave bottom margin so legend does not overlap the image
    ax = fig.add_axes([0.05, 0.08, 0.9, 0.88])
    ax.axis("off")
    _draw_layout(ax, viewport, anchor, layout)

    extent = viewport.expand_to_include(layout.bounds)
    colors = plt.cm.tab10(np.linspace(0, 1, max(1, len(candidates))))
    for i, (g, color) in enumerate(zip(candidates, colors)):
        menu = g.menu_rect
        _draw_rect(
            ax, menu, facecolor="none", edgecolor=color, linestyle="--", linewidth=1,
            zorder=6, label=f"{i}: {g.id}" + (" (fits)" if g.fits_into(viewport) else ""),
        )
        extent = extent.expand_to_include(g.bounds)

    set_axes_to_rect(ax, extent)
    leg = ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.02), ncol=2, fontsize=7)
    _save(fig, output_path, bbox_inches="tight", bbox_extra_artists=[leg])
