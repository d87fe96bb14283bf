"""
Selection driver.

Connects a ``DistanceMeasure`` and the selection ratio solver to a
``Selector`` that performs the actual selection. Selection is the second
step of the procedure; the first one is computing the selection ratio.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from loguru import logger

from .measure import DistanceMeasure, measure_for_params
from .models import Edge, SelectionParams
from .solver import compute_selection_ratio


class Selector(Protocol):
    """Contract for performing the selection on a scrollable view."""

    def on_selection_updated(
        self,
        ratio: Optional[float],
        top_distance: Optional[float],
        bottom_distance: Optional[float],
        scroll_delta: int,
    ) -> None:
        """Perform the selection.

        Args:
            ratio: Selection ratio computed from the view state, or None if
                no decision was possible (keep the previous selection)
            top_distance: Top edge distance used for the ratio
            bottom_distance: Bottom edge distance used for the ratio
            scroll_delta: Vertical distance scrolled by the view
        """
        ...


@dataclass(frozen=True)
class SelectionUpdate:
    """Snapshot of a single selection update."""

    ratio: Optional[float]
    top_distance: Optional[float]
    bottom_distance: Optional[float]
    scroll_delta: int


class ScrollSelector:
    """Recompute the selection ratio on every vertical scroll.

    Args:
        distance_measure: Provider of the content edge distances
        params: Solver parameters
        selector: Receiver of the computed ratio
    """

    def __init__(
        self,
        distance_measure: DistanceMeasure,
        params: SelectionParams,
        selector: Selector,
    ) -> None:
        self.distance_measure = distance_measure
        self.params = params
        self.selector = selector
        self.enabled = True
        self.last_update: Optional[SelectionUpdate] = None

    def update_params(self, params: SelectionParams) -> None:
        """Use new params starting with the next scroll event."""
        logger.debug(f"Selection params updated: {params}")
        self.params = params

    def compute(self, scroll_delta: int = 0) -> SelectionUpdate:
        """Measure both edges and compute the ratio without notifying the selector."""
        params = self.params
        top = measure_for_params(self.distance_measure, params, Edge.TOP)
        bottom = measure_for_params(self.distance_measure, params, Edge.BOTTOM)
        ratio = compute_selection_ratio(params, top, bottom)
        return SelectionUpdate(
            ratio=ratio,
            top_distance=top,
            bottom_distance=bottom,
            scroll_delta=scroll_delta,
        )

    def on_scrolled(self, dy: int) -> Optional[SelectionUpdate]:
        """Handle a scroll event.

        Only vertical changes trigger a selection update.

        Args:
            dy: Vertical scroll delta

        Returns:
            The update forwarded to the selector, or None if skipped
        """
        if not self.enabled or dy == 0:
            return None

        update = self.compute(dy)
        if update.ratio is None:
            logger.debug(
                f"No selection ratio (top={update.top_distance}, bottom={update.bottom_distance})"
            )

        self.selector.on_selection_updated(
            update.ratio, update.top_distance, update.bottom_distance, dy
        )
        self.last_update = update
        return update
