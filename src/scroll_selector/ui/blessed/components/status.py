"""Status bar rendering."""

from typing import Optional

from blessed import Terminal

from ..helpers import write_at
from ..state import DemoState

HELP_TEXT = "↑/k ↓/j scroll · PgUp/PgDn page · g/G top/bottom · ? help · q quit"


def _format_distance(distance: Optional[float]) -> str:
    return "∞" if distance is None else f"{distance:.0f}"


def format_status(state: DemoState) -> str:
    """Build the one-line status summary."""
    ratio = "—" if state.ratio is None else f"{state.ratio:.3f}"
    selected = "—" if state.selected_index is None else str(state.selected_index + 1)
    layout = state.layout
    return (
        f"ratio {ratio} · item {selected}/{layout.item_count} · "
        f"top {_format_distance(state.top_distance)} · "
        f"bottom {_format_distance(state.bottom_distance)} · "
        f"offset {layout.scroll_offset}/{layout.max_scroll_offset}"
    )


def render_status(term: Terminal, state: DemoState, y: int) -> None:
    """
    Render the status bar (and help line when toggled).

    Args:
        term: blessed Terminal instance
        state: Current demo state
        y: Starting y position
    """
    write_at(term, 0, y, term.reverse(format_status(state).ljust(term.width)))
    if state.show_help:
        write_at(term, 0, y + 1, term.cyan(HELP_TEXT))
    else:
        write_at(term, 0, y + 1, term.dim("? for help"))
