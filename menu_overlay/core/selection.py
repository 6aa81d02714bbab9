"""
Best-fit selection over an ordered candidate list.
List order encodes preference; the previous layout id wins outright.
"""

from __future__ import annotations

import logging
from typing import Sequence

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.config import EPSILON, LAYOUT_DEBUG
from menu_overlay.core.geometry import Rect

logger = logging.getLogger(__name__)


def _displacement_squared(geometry: MenuGeometry, bounds: Rect) -> float:
    """How far the preview center moves when the candidate is fitted into bounds."""
    fitted = geometry.fit_into(bounds)
    return (fitted.preview_rect.center - geometry.preview_rect.center).distance_squared


def best_fit_geometry(
    bounds: Rect,
    geometries: Sequence[MenuGeometry],
    previous_layout_id: str | None = None,
) -> MenuGeometry:
    """
    Pick the candidate that fits best and shift it just enough to fit.

    1. Candidate with previous_layout_id, fitted into bounds.
    2. First candidate that already fits, unchanged.
    3. Among candidates small enough to fit, the one whose preview moves least
       when fitted (earlier wins ties), fitted into bounds.
    4. Otherwise the first candidate, unchanged (may overflow bounds).
    """
    if not geometries:
        raise ValueError("best_fit_geometry needs at least one candidate")

    if previous_layout_id is not None:
        for g in geometries:
            if g.id == previous_layout_id:
                logger.debug("Keeping previous layout %s", g.id)
                return g.fit_into(bounds)
        logger.debug("Previous layout %s not offered; selecting afresh", previous_layout_id)

    for g in geometries:
        if LAYOUT_DEBUG:
            logger.debug("Candidate %s bounds=%s fits=%s", g.id, g.bounds, g.fits_into(bounds))
        if g.fits_into(bounds):
            logger.debug("First fit: %s", g.id)
            return g

    max_size = bounds.size.inflate(EPSILON)
    small_enough = [g for g in geometries if g.bounds.size.fits_within(max_size)]
    if not small_enough:
        logger.info(
            "No candidate fits %.1fx%.1f; using %s unadjusted",
            bounds.width, bounds.height, geometries[0].id,
        )
        return geometries[0]

    best = small_enough[0]
    best_d = _displacement_squared(best, bounds)
    for g in small_enough[1:]:
        d = _displacement_squared(g, bounds)
        if not best_d <= d + EPSILON:
            best, best_d = g, d
    logger.debug("Least displacement: %s (d2=%.3f)", best.id, best_d)
    return best.fit_into(bounds)
