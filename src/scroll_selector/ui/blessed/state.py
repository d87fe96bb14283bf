"""Demo UI state management - immutable state updates."""

import random
from dataclasses import dataclass, replace
from typing import Optional

from scroll_selector.core.config import DemoConfig
from scroll_selector.domain.selection import ListLayout, SelectionArea, SelectionUpdate

from .helpers import clamp_scroll_offset


@dataclass(frozen=True)
class DemoState:
    """State of the scroll-to-select demo.

    The selected item only changes when a ratio is available; a None ratio
    keeps the previous selection.
    """

    layout: ListLayout
    area: SelectionArea = SelectionArea()
    selected_index: Optional[int] = None
    ratio: Optional[float] = None
    top_distance: Optional[float] = None
    bottom_distance: Optional[float] = None
    last_delta: int = 0
    show_help: bool = False


def generate_item_heights(
    count: int, min_height: int, max_height: int, seed: int
) -> tuple[int, ...]:
    """Generate deterministic pseudo-random item heights.

    Given the same seed, the same heights are always produced.
    """
    if min_height < 1 or max_height < min_height:
        raise ValueError(
            f"Invalid item height range [{min_height}, {max_height}]"
        )
    rng = random.Random(seed)
    return tuple(rng.randint(min_height, max_height) for _ in range(count))


def create_demo_state(
    demo: DemoConfig, viewport_height: int, area: Optional[SelectionArea] = None
) -> DemoState:
    """Create the initial demo state for a viewport of the given height."""
    heights = generate_item_heights(
        demo.item_count, demo.min_item_height, demo.max_item_height, demo.seed
    )
    layout = ListLayout(item_heights=heights, viewport_height=max(1, viewport_height))
    return DemoState(layout=layout, area=area or SelectionArea())


def with_layout(state: DemoState, layout: ListLayout) -> DemoState:
    return replace(state, layout=layout)


def resize_viewport(state: DemoState, viewport_height: int) -> DemoState:
    """Return state with a new viewport height, keeping the offset in bounds."""
    viewport_height = max(1, viewport_height)
    offset = clamp_scroll_offset(
        state.layout.scroll_offset, state.layout.content_height, viewport_height
    )
    layout = replace(state.layout, viewport_height=viewport_height, scroll_offset=offset)
    return with_layout(state, layout)


def apply_selection_update(state: DemoState, update: SelectionUpdate) -> DemoState:
    """Apply a selection update, keeping the previous selection for a None ratio."""
    selected = state.selected_index
    if update.ratio is not None:
        selected = state.layout.item_at_ratio(update.ratio, state.area)

    return replace(
        state,
        selected_index=selected,
        ratio=update.ratio,
        top_distance=update.top_distance,
        bottom_distance=update.bottom_distance,
        last_delta=update.scroll_delta,
    )


def toggle_help(state: DemoState) -> DemoState:
    return replace(state, show_help=not state.show_help)
