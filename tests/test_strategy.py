"""
Strategy choice by viewport size, dispatch, and re-layout continuity.
"""

from __future__ import annotations

import pytest

from menu_overlay.core.geometry import Rect, Size
from menu_overlay.core.strategy import (
    CompactStrategy,
    StandardStrategy,
    build_candidates,
    layout_for_input,
    relayout_sequence,
    run_layout,
    strategy_for_size,
)
from menu_overlay.core.text_metrics import fixed_menu_measure
from menu_overlay.core.types import MenuLayoutInput


def _input(viewport: Rect, anchor: Rect, preview: Size, menu: Size = Size(50, 50)) -> MenuLayoutInput:
    return MenuLayoutInput(
        layout_menu=fixed_menu_measure(menu),
        bounds=viewport,
        primary_item=anchor,
        menu_preview_size=preview,
    )


@pytest.mark.parametrize(
    "size, expected",
    [
        (Size(400, 800), CompactStrategy()),
        (Size(800, 400), StandardStrategy(allow_vertical_attachment=False)),
        (Size(500, 500), StandardStrategy(allow_vertical_attachment=False)),
        (Size(550, 900), StandardStrategy(allow_vertical_attachment=True)),
        (Size(1000, 800), StandardStrategy(allow_vertical_attachment=True)),
    ],
)
def test_strategy_for_size(size: Size, expected) -> None:
    assert strategy_for_size(size) == expected


def test_strategy_for_size_accepts_tuples() -> None:
    assert strategy_for_size((390, 844)) == CompactStrategy()


def test_strategy_names() -> None:
    assert StandardStrategy().name == "standard"
    assert StandardStrategy(allow_vertical_attachment=False).name == "standard_horizontal"
    assert CompactStrategy().name == "compact"


def test_phone_portrait_uses_compact_layout() -> None:
    layout = layout_for_input(
        _input(Rect(0, 0, 400, 800), Rect(150, 380, 50, 40), Size(200, 150), Size(180, 60)),
    )
    assert layout.layout_id == "bottom-left"


def test_phone_landscape_never_attaches_vertically() -> None:
    layout_input = _input(Rect(0, 0, 800, 400), Rect(350, 180, 100, 40), Size(300, 100))
    ids = {g.id for g in build_candidates(strategy_for_size(layout_input.bounds.size), layout_input)}
    assert all(i.startswith("horizontal-") for i in ids)
    assert layout_for_input(layout_input).layout_id.startswith("horizontal-")


def test_run_layout_dispatches_on_strategy() -> None:
    layout_input = _input(Rect(0, 0, 1000, 800), Rect(450, 380, 100, 40), Size(300, 100))
    assert run_layout(StandardStrategy(), layout_input).layout_id == "vertical-bottom-left"
    assert run_layout(
        StandardStrategy(allow_vertical_attachment=False), layout_input,
    ).layout_id == "horizontal-top-right"
    assert run_layout(CompactStrategy(), layout_input).layout_id.startswith("bottom-")


def test_relayout_keeps_layout_id_across_passes() -> None:
    viewport = Rect(0, 0, 1000, 800)
    first = _input(viewport, Rect(450, 380, 100, 40), Size(300, 100))
    second = _input(viewport, Rect(450, 700, 100, 40), Size(300, 100))
    # Fresh selection for the second pass would flip the menu above.
    assert layout_for_input(second).layout_id == "vertical-top-left"

    layouts = relayout_sequence([first, second])
    assert [l.layout_id for l in layouts] == ["vertical-bottom-left", "vertical-bottom-left"]
    assert layouts[1].bounds.bottom == pytest.approx(800)


def test_relayout_seeds_first_pass_with_previous_id() -> None:
    viewport = Rect(0, 0, 1000, 800)
    layouts = relayout_sequence(
        [_input(viewport, Rect(450, 380, 100, 40), Size(300, 100))],
        previous_layout_id="vertical-top-right",
    )
    assert layouts[0].layout_id == "vertical-top-right"


def test_relayout_empty_sequence() -> None:
    assert relayout_sequence([]) == []
