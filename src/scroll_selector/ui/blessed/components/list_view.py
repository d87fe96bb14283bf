"""Scrollable item list rendering."""

from blessed import Terminal

from ..helpers import fit_width, ratio_to_row, scrollbar_thumb, write_at
from ..state import DemoState


def item_label(index: int, height: int) -> str:
    return f"Item {index + 1:>4}  ({height} row{'s' if height != 1 else ''})"


def build_rows(state: DemoState) -> list[tuple[int, bool]]:
    """
    Compute what every viewport row shows.

    Args:
        state: Current demo state

    Returns:
        List of (item_index, is_first_row_of_item) per viewport row; index is
        -1 for rows past the end of the content
    """
    layout = state.layout
    rows = []
    for row in range(layout.viewport_height):
        index = layout.item_at_y(row)
        if index is None:
            rows.append((-1, False))
            continue
        first_row = layout.item_offset_in_viewport(index) == row
        rows.append((index, first_row or row == 0))
    return rows


def render_list(term: Terminal, state: DemoState, y: int, width: int) -> None:
    """
    Render the visible part of the list with selection and ratio marker.

    Args:
        term: blessed Terminal instance
        state: Current demo state
        y: Starting y position
        width: Available width (one column is used by the scrollbar)
    """
    layout = state.layout
    height = layout.viewport_height
    marker_row = ratio_to_row(state.ratio, height, state.area, layout.content_height)
    thumb_start, thumb_size = scrollbar_thumb(
        layout.scroll_offset, layout.content_height, height
    )
    area_from = int(state.area.get_from_y(height))
    area_to = int(state.area.get_to_y(height))
    text_width = max(0, width - 4)

    for row, (index, first_row) in enumerate(build_rows(state)):
        marker = "▶" if row == marker_row else " "
        area_edge = "│" if area_from <= row < area_to else " "
        bar = "█" if thumb_start <= row < thumb_start + thumb_size else "░"

        if index < 0:
            text = term.dim(fit_width("~", text_width))
        else:
            label = item_label(index, layout.item_heights[index]) if first_row else ""
            text = fit_width(label, text_width)
            if index == state.selected_index:
                text = term.black_on_green(text)
            elif index % 2:
                text = term.white(text)
            else:
                text = term.bright_black(text)

        write_at(term, 0, y + row, term.yellow(marker) + term.dim(area_edge) + " " + text + bar)
