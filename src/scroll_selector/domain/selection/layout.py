"""
Vertical list layout model.

A minimal, immutable model of a scrollable list: item heights, viewport
height and the current scroll offset. All positions are in content pixels
(or terminal rows) unless stated as viewport-relative.
"""

from dataclasses import dataclass, replace
from itertools import accumulate
from typing import Optional

from .exceptions import InvalidLayoutError
from .models import SelectionArea


@dataclass(frozen=True)
class ListLayout:
    """Immutable layout state of a vertically scrolling list.

    ``scroll_offset`` is the content Y coordinate shown at the viewport top.
    Layout changes return a new instance instead of mutating.
    """

    item_heights: tuple[int, ...]
    viewport_height: int
    scroll_offset: int = 0

    def __post_init__(self) -> None:
        if self.viewport_height <= 0:
            raise InvalidLayoutError(
                f"viewport_height must be positive, got {self.viewport_height}"
            )
        if any(h <= 0 for h in self.item_heights):
            raise InvalidLayoutError("Item heights must be positive")

    @property
    def item_count(self) -> int:
        return len(self.item_heights)

    @property
    def content_height(self) -> int:
        return sum(self.item_heights)

    @property
    def max_scroll_offset(self) -> int:
        return max(0, self.content_height - self.viewport_height)

    def item_top(self, index: int) -> int:
        """Content Y coordinate of the top of item ``index``."""
        return sum(self.item_heights[:index])

    def item_offset_in_viewport(self, index: int) -> int:
        """Viewport-relative Y of the item's top (negative if partly scrolled off)."""
        return self.item_top(index) - self.scroll_offset

    def scroll_by(self, dy: int) -> tuple["ListLayout", int]:
        """Scroll the list by dy, clamped to the content bounds.

        Args:
            dy: Requested scroll delta (positive scrolls toward the bottom)

        Returns:
            Tuple of (new layout, consumed delta)
        """
        new_offset = max(0, min(self.scroll_offset + dy, self.max_scroll_offset))
        consumed = new_offset - self.scroll_offset
        return replace(self, scroll_offset=new_offset), consumed

    def scroll_to(self, offset: int) -> tuple["ListLayout", int]:
        return self.scroll_by(offset - self.scroll_offset)

    def _index_at_content_y(self, y: float) -> Optional[int]:
        if y < 0 or not self.item_heights:
            return None
        for index, bottom in enumerate(accumulate(self.item_heights)):
            if y < bottom:
                return index
        return None

    def first_visible_index(self) -> Optional[int]:
        """Index of the item at the viewport top, or None for an empty list."""
        return self._index_at_content_y(self.scroll_offset)

    def last_visible_index(self) -> Optional[int]:
        """Index of the item at the viewport bottom, or None for an empty list."""
        if not self.item_heights:
            return None
        bottom_y = min(self.scroll_offset + self.viewport_height, self.content_height) - 1
        return self._index_at_content_y(bottom_y)

    def item_at_y(self, y: float) -> Optional[int]:
        """Index of the item under viewport-relative Y, or None past the content."""
        return self._index_at_content_y(self.scroll_offset + y)

    def item_at_ratio(
        self, ratio: Optional[float], area: Optional[SelectionArea] = None
    ) -> Optional[int]:
        """Index of the item at a selection ratio of the viewport.

        Args:
            ratio: Selection ratio relative to ``area`` (or the whole viewport)
            area: Optional selection area the ratio is expressed in

        Returns:
            Index of the selected item, or None if the ratio is None or the
            list is empty
        """
        if ratio is None or not self.item_heights:
            return None
        view_ratio = area.remap_for_view(ratio) if area else ratio
        visible_height = min(self.viewport_height, self.content_height)
        # Ratio 1.0 maps onto the last visible pixel row
        y = min(max(0.0, view_ratio * self.viewport_height), visible_height - 1)
        return self.item_at_y(y)
