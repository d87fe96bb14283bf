"""
Edge distance measurement.

Defines the contract for components that tell how far the current scroll
position is from the top or bottom edge of the content, and a reference
implementation for ``ListLayout``.
"""

from typing import Callable, Optional, Protocol

from loguru import logger

from .layout import ListLayout
from .models import Edge, SelectionParams


class DistanceMeasure(Protocol):
    """Protocol for measuring the distance to a content edge.

    Implementations scan at most ``perception_range`` away from the viewport;
    an edge farther than that (or one that cannot be determined cheaply) is
    reported as None.
    """

    def measure(self, perception_range: float, edge: Edge) -> Optional[float]:
        """Measure the distance from the current scroll position to ``edge``.

        Args:
            perception_range: Maximum distance allowed to scan (positive)
            edge: Content edge to look for

        Returns:
            Distance within [0, perception_range), or None
        """
        ...


def measure_for_params(
    distance_measure: DistanceMeasure, params: SelectionParams, edge: Edge
) -> Optional[float]:
    """Measure ``edge`` using the perception range the params define for it."""
    if edge == Edge.TOP:
        return distance_measure.measure(params.top_perception_range, edge)
    return distance_measure.measure(params.bottom_perception_range, edge)


class ListDistanceMeasure:
    """``DistanceMeasure`` for a ``ListLayout``.

    Walks outward from the first (or last) visible item and accumulates the
    heights of the items beyond the viewport until either the perception range
    is exhausted or the content ends. Only the items inside the range are
    measured, so the cost is bounded by the perception range rather than the
    list size.

    Args:
        layout_provider: Callable returning the current layout
        measure_item: Optional callable returning the height of an item that
            is not laid out yet; defaults to the layout's recorded height
    """

    def __init__(
        self,
        layout_provider: Callable[[], ListLayout],
        measure_item: Optional[Callable[[int], int]] = None,
    ) -> None:
        self._layout_provider = layout_provider
        self._measure_item = measure_item

    def _item_height(self, layout: ListLayout, index: int) -> int:
        if self._measure_item is not None:
            return self._measure_item(index)
        return layout.item_heights[index]

    def measure(self, perception_range: float, edge: Edge) -> Optional[float]:
        layout = self._layout_provider()

        if edge == Edge.BOTTOM:
            position = layout.last_visible_index()
        else:
            position = layout.first_visible_index()

        if position is None:
            return None

        # Portion of the boundary item hanging outside the viewport
        if edge == Edge.BOTTOM:
            item_bottom = layout.item_offset_in_viewport(position) + layout.item_heights[position]
            explored = item_bottom - layout.viewport_height
            position += 1
        else:
            explored = -layout.item_offset_in_viewport(position)
            position -= 1

        while explored < perception_range and 0 <= position < layout.item_count:
            explored += self._item_height(layout, position)
            position += 1 if edge == Edge.BOTTOM else -1

        if explored >= perception_range:
            logger.trace(f"{edge.value} edge beyond perception range {perception_range}")
            return None
        return max(0, explored)
