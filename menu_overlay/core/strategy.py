"""
Strategy choice by viewport size, dispatch, and re-layout sequences.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence, Union

from menu_overlay.core.candidates import MenuGeometry
from menu_overlay.core.config import PHONE_SHORTEST_SIDE
from menu_overlay.core.geometry import Size
from menu_overlay.core.strategy_compact import compact_candidates, layout_compact, select_compact
from menu_overlay.core.strategy_standard import (
    layout_standard,
    select_standard,
    standard_candidates,
)
from menu_overlay.core.types import MenuLayout, MenuLayoutInput


@dataclass(frozen=True)
class StandardStrategy:
    allow_vertical_attachment: bool = True

    @property
    def name(self) -> str:
        return "standard" if self.allow_vertical_attachment else "standard_horizontal"


@dataclass(frozen=True)
class CompactStrategy:
    @property
    def name(self) -> str:
        return "compact"


MenuLayoutStrategy = Union[StandardStrategy, CompactStrategy]


def strategy_for_size(screen_size: Size) -> MenuLayoutStrategy:
    """Phones (shortest side < 550) get compact in portrait, horizontal-only otherwise."""
    screen_size = Size(*screen_size)
    if screen_size.shortest_side < PHONE_SHORTEST_SIDE:
        if screen_size.is_portrait:
            return CompactStrategy()
        return StandardStrategy(allow_vertical_attachment=False)
    return StandardStrategy(allow_vertical_attachment=True)


def run_layout(strategy: MenuLayoutStrategy, layout_input: MenuLayoutInput) -> MenuLayout:
    if isinstance(strategy, CompactStrategy):
        return layout_compact(layout_input)
    return layout_standard(layout_input, strategy.allow_vertical_attachment)


def build_candidates(strategy: MenuLayoutStrategy, layout_input: MenuLayoutInput) -> list[MenuGeometry]:
    """Ordered candidates the strategy hands to the selector. Measures the menu once."""
    if isinstance(strategy, CompactStrategy):
        return compact_candidates(layout_input)
    return standard_candidates(layout_input, strategy.allow_vertical_attachment)


def select_layout(
    strategy: MenuLayoutStrategy,
    layout_input: MenuLayoutInput,
    geometries: Sequence[MenuGeometry],
) -> MenuLayout:
    """Finish a layout pass from candidates already built by build_candidates."""
    if isinstance(strategy, CompactStrategy):
        return select_compact(layout_input, geometries)
    return select_standard(layout_input, geometries)


def layout_for_input(layout_input: MenuLayoutInput) -> MenuLayout:
    """Choose the strategy from the viewport size and run it."""
    return run_layout(strategy_for_size(layout_input.bounds.size), layout_input)


def relayout_sequence(
    inputs: Iterable[MenuLayoutInput],
    previous_layout_id: str | None = None,
) -> list[MenuLayout]:
    """
    Lay out successive passes (e.g. while resizing), feeding each result's
    id back as previous_layout_id of the next pass.
    """
    layouts: list[MenuLayout] = []
    for layout_input in inputs:
        if previous_layout_id is not None:
            layout_input = replace(layout_input, previous_layout_id=previous_layout_id)
        layout = layout_for_input(layout_input)
        layouts.append(layout)
        previous_layout_id = layout.layout_id
    return layouts
