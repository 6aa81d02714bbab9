"""
Export a layout as self-contained SVG: viewport, anchor outline, preview, menu.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from menu_overlay.core.geometry import Rect
from menu_overlay.core.types import MenuLayout

SVG_NS = "http://www.w3.org/2000/svg"

logger = logging.getLogger(__name__)


def _rect_element(parent: ET.Element, rect: Rect, attrs: dict[str, str]) -> ET.Element:
    return ET.SubElement(
        parent,
        "rect",
        {
            "x": f"{rect.left:.2f}",
            "y": f"{rect.top:.2f}",
            "width": f"{max(0.0, rect.width):.2f}",
            "height": f"{max(0.0, rect.height):.2f}",
            **attrs,
        },
    )


def layout_svg(viewport: Rect, anchor: Rect, layout: MenuLayout, margin: float = 20.0) -> str:
    """SVG document as a string. Screen coordinates, so no y-flip."""
    extent = viewport.expand_to_include(layout.bounds)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": f"{extent.width + 2 * margin:.0f}",
            "height": f"{extent.height + 2 * margin:.0f}",
            "viewBox": (
                f"{extent.left - margin:.2f} {extent.top - margin:.2f} "
                f"{extent.width + 2 * margin:.2f} {extent.height + 2 * margin:.2f}"
            ),
        },
    )
    _rect_element(root, viewport, {"id": "viewport", "fill": "#f4f4f4", "stroke": "black"})
    _rect_element(
        root, anchor,
        {"id": "anchor", "fill": "none", "stroke": "grey", "stroke-dasharray": "2 2"},
    )
    _rect_element(root, layout.preview_rect, {"id": "preview", "fill": "#9ecae1", "stroke": "navy"})
    menu = layout.menu_rect
    _rect_element(
        root, menu,
        {"id": "menu", "fill": "white", "stroke": "black", "data-layout-id": layout.layout_id},
    )
    label = ET.SubElement(
        root,
        "text",
        {
            "x": f"{menu.center.dx:.2f}",
            "y": f"{menu.center.dy:.2f}",
            "font-family": "sans-serif",
            "font-size": "10",
            "text-anchor": "middle",
            "dominant-baseline": "middle",
        },
    )
    label.text = layout.layout_id
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode")


def export_layout_svg(
    viewport: Rect,
    anchor: Rect,
    layout: MenuLayout,
    out_path: str | Path,
) -> Path | None:
    """Write layout SVG; returns the path, or None if writing failed."""
    path = Path(out_path)
    try:
        path.write_text(layout_svg(viewport, anchor, layout), encoding="utf-8")
    except OSError as e:
        logger.warning("Could not write SVG %s: %s", path, e)
        return None
    return path
