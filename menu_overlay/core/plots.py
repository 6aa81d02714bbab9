"""
Evaluation plots: fit rate by family, continuity stability, layout id counts.
Saves under reports/<run_name>/plots/.
"""

from __future__ import annotations

import json
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def _load_summary(report_dir: Path) -> dict:
    """by_family section of evaluation_summary.json, or {} if missing."""
    json_path = report_dir / "evaluation_summary.json"
    if not json_path.exists():
        return {}
    return json.loads(json_path.read_text(encoding="utf-8")).get("by_family", {})


def _plots_dir(report_dir: Path) -> Path:
    plots_dir = report_dir / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    return plots_dir


def plot_fit_rate(report_dir: Path) -> Path:
    """Bar chart of fit rate by viewport family. Saves to plots/fit_rate.png."""
    by_family = _load_summary(report_dir)
    out = _plots_dir(report_dir) / "fit_rate.png"
    families = list(by_family.keys())
    rates = [by_family[f]["fit_rate"] for f in families]
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(families, rates, color="steelblue", alpha=0.8)
    ax.set_ylabel("Fit rate")
    ax.set_xlabel("Viewport family")
    ax.set_ylim(0, 1.05)
    ax.set_title("Layouts fully inside the viewport" if families else "Fit rate (no data)")
    plt.tight_layout()
    fig.savefig(out, dpi=120)
    plt.close(fig)
    return out


def plot_continuity(report_dir: Path) -> Path:
    """Grouped bars: share of resize sequences with no layout id change, with vs without continuity."""
    by_family = _load_summary(report_dir)
    out = _plots_dir(report_dir) / "continuity.png"
    families = list(by_family.keys())
    x = np.arange(len(families))
    with_c = [by_family[f]["stable_rate_with_continuity"] for f in families]
    without_c = [by_family[f]["stable_rate_without_continuity"] for f in families]
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(x - 0.2, with_c, width=0.4, label="previous id fed back", color="#2ecc71")
    ax.bar(x + 0.2, without_c, width=0.4, label="fresh every pass", color="#3498db")
    ax.set_xticks(x)
    ax.set_xticklabels(families)
    ax.set_ylim(0, 1.05)
    ax.set_ylabel("Stable sequences")
    ax.set_title("Layout id stability while resizing")
    ax.legend(fontsize=8)
    plt.tight_layout()
    fig.savefig(out, dpi=120)
    plt.close(fig)
    return out


def plot_layout_ids(report_dir: Path) -> Path:
    """Horizontal bars: how often each layout id was chosen, all families pooled."""
    by_family = _load_summary(report_dir)
    out = _plots_dir(report_dir) / "layout_ids.png"
    counts: dict[str, int] = {}
    for fam in by_family.values():
        for layout_id, n in fam.get("layout_ids", {}).items():
            counts[layout_id] = counts.get(layout_id, 0) + n
    ids = sorted(counts, key=counts.get)
    fig, ax = plt.subplots(figsize=(6, max(2.0, 0.3 * len(ids) + 1)))
    ax.barh(ids, [counts[i] for i in ids], color="coral", alpha=0.8)
    ax.set_xlabel("Times chosen")
    ax.set_title("Chosen layout ids")
    plt.tight_layout()
    fig.savefig(out, dpi=120)
    plt.close(fig)
    return out


def generate_all_plots(report_dir: Path) -> list[Path]:
    """Generate all evaluation plots."""
    return [
        plot_fit_rate(report_dir),
        plot_continuity(report_dir),
        plot_layout_ids(report_dir),
    ]
