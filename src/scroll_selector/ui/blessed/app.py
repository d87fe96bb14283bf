"""Main event loop and entry point for the blessed demo."""

import sys
from dataclasses import replace
from typing import Optional

from blessed import Terminal
from loguru import logger

from scroll_selector.core.config import Config
from scroll_selector.core.output import clear_ui_mode, log, set_ui_mode
from scroll_selector.domain.selection import (
    ListDistanceMeasure,
    ScrollSelector,
    SelectionParams,
    SelectionUpdate,
)

from .components import render_list, render_status
from .events import parse_key
from .state import (
    DemoState,
    apply_selection_update,
    create_demo_state,
    resize_viewport,
    toggle_help,
    with_layout,
)

# Rows reserved below the list for the status bar and help line
STATUS_HEIGHT = 2

# Item heights are in rows; perception ranges are configured in pixels
ROW_PIXELS = 20


def scale_params_to_rows(params: SelectionParams, row_pixels: int = ROW_PIXELS) -> SelectionParams:
    """Convert pixel perception ranges into terminal rows."""
    return replace(
        params,
        top_perception_range=max(1.0, params.top_perception_range / row_pixels),
        bottom_perception_range=max(1.0, params.bottom_perception_range / row_pixels),
    )


class DemoSession:
    """Owns the demo state and acts as the ``Selector`` of a ``ScrollSelector``."""

    def __init__(self, state: DemoState, params: SelectionParams) -> None:
        self.state = state
        self.scroll_selector = ScrollSelector(
            ListDistanceMeasure(lambda: self.state.layout),
            params,
            self,
        )
        self.state = apply_selection_update(self.state, self.scroll_selector.compute())

    def on_selection_updated(
        self,
        ratio: Optional[float],
        top_distance: Optional[float],
        bottom_distance: Optional[float],
        scroll_delta: int,
    ) -> None:
        self.state = apply_selection_update(
            self.state,
            SelectionUpdate(ratio, top_distance, bottom_distance, scroll_delta),
        )

    def scroll(self, dy: int) -> int:
        """Scroll the list and let the scroll selector update the selection.

        Returns:
            Consumed scroll delta (0 at the content bounds)
        """
        layout, consumed = self.state.layout.scroll_by(dy)
        self.state = with_layout(self.state, layout)
        self.scroll_selector.on_scrolled(consumed)
        return consumed

    def scroll_to_top(self) -> int:
        return self.scroll(-self.state.layout.scroll_offset)

    def scroll_to_bottom(self) -> int:
        layout = self.state.layout
        return self.scroll(layout.max_scroll_offset - layout.scroll_offset)

    def resize(self, viewport_height: int) -> None:
        self.state = resize_viewport(self.state, viewport_height)
        self.state = apply_selection_update(self.state, self.scroll_selector.compute())


def render(term: Terminal, state: DemoState) -> None:
    render_list(term, state, 0, term.width)
    render_status(term, state, state.layout.viewport_height)
    sys.stdout.flush()


def run_demo(config: Config) -> None:
    """Run the interactive scroll-to-select demo until the user quits."""
    term = Terminal()
    # The selection area is applied when picking the item, so the ratio stays in (0, 1)
    params = replace(
        scale_params_to_rows(config.selection.to_params()), remapped_interval=None
    )
    area = config.selection.to_area()

    state = create_demo_state(config.demo, term.height - STATUS_HEIGHT, area)
    session = DemoSession(state, params)
    logger.info(
        f"Demo started: {state.layout.item_count} items, "
        f"content height {state.layout.content_height}, params={params}"
    )

    set_ui_mode()
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            last_size = (term.width, term.height)
            print(term.clear, end="")
            render(term, session.state)

            while True:
                key = term.inkey(timeout=0.1)

                if (term.width, term.height) != last_size:
                    last_size = (term.width, term.height)
                    session.resize(term.height - STATUS_HEIGHT)
                    print(term.clear, end="")
                    render(term, session.state)

                if not key:
                    continue

                page = max(1, session.state.layout.viewport_height - 1)
                action = parse_key(key, config.demo.scroll_step, page)

                match action.type:
                    case "quit":
                        break
                    case "scroll":
                        session.scroll(action.amount)
                    case "top":
                        session.scroll_to_top()
                    case "bottom":
                        session.scroll_to_bottom()
                    case "help":
                        session.state = toggle_help(session.state)
                    case _:
                        continue

                render(term, session.state)
    except KeyboardInterrupt:
        logger.info("Ctrl+C detected - leaving demo")
    finally:
        clear_ui_mode()
        selected = session.state.selected_index
        log(
            "Demo finished: selected item "
            f"{'none' if selected is None else selected + 1} "
            f"at offset {session.state.layout.scroll_offset}"
        )
