"""Pure helper functions for scrolling and selection in the list demo."""

from typing import Optional

from scroll_selector.domain.selection.models import SelectionArea


def clamp_scroll_offset(offset: int, content_height: int, viewport_height: int) -> int:
    """Clamp a scroll offset to [0, content_height - viewport_height].

    Examples:
        >>> clamp_scroll_offset(offset=50, content_height=40, viewport_height=10)
        30

        >>> clamp_scroll_offset(offset=-3, content_height=40, viewport_height=10)
        0

        >>> # Content shorter than the viewport cannot scroll
        >>> clamp_scroll_offset(offset=5, content_height=8, viewport_height=10)
        0
    """
    max_offset = max(0, content_height - viewport_height)
    return max(0, min(offset, max_offset))


def scrollbar_thumb(
    offset: int, content_height: int, viewport_height: int
) -> tuple[int, int]:
    """Compute the scrollbar thumb position and size in viewport rows.

    Args:
        offset: Current scroll offset
        content_height: Total content height
        viewport_height: Visible rows

    Returns:
        Tuple of (thumb_start, thumb_size); the thumb covers the whole track
        when all content fits

    Examples:
        >>> scrollbar_thumb(offset=0, content_height=100, viewport_height=10)
        (0, 1)

        >>> scrollbar_thumb(offset=90, content_height=100, viewport_height=10)
        (9, 1)
    """
    if viewport_height <= 0:
        return 0, 0
    if content_height <= viewport_height:
        return 0, viewport_height

    size = max(1, round(viewport_height * viewport_height / content_height))
    max_offset = content_height - viewport_height
    start = round((viewport_height - size) * offset / max_offset)
    return start, size


def ratio_to_row(
    ratio: Optional[float],
    viewport_height: int,
    area: Optional[SelectionArea] = None,
    content_height: Optional[int] = None,
) -> Optional[int]:
    """Map a selection ratio to the viewport row it points at.

    Rows below the end of the content are never returned, so the row always
    matches ``ListLayout.item_at_ratio`` for the same inputs.

    Args:
        ratio: Selection ratio relative to ``area`` (or the whole viewport)
        viewport_height: Height of the viewport in rows
        area: Optional selection area the ratio is expressed in
        content_height: Total content height; None means the content fills the view

    Examples:
        >>> ratio_to_row(0.5, viewport_height=20)
        10

        >>> ratio_to_row(1.0, viewport_height=20)  # last row, not one past it
        19

        >>> ratio_to_row(1.0, viewport_height=20, content_height=6)
        5
    """
    if ratio is None or viewport_height <= 0:
        return None
    visible_height = viewport_height
    if content_height is not None:
        visible_height = min(viewport_height, content_height)
    if visible_height <= 0:
        return None
    view_ratio = area.remap_for_view(ratio) if area else ratio
    row = int(view_ratio * viewport_height)
    return max(0, min(row, visible_height - 1))
