"""
Selection domain models.

Contains the immutable parameter record consumed by the selection ratio solver
and the selection area that scales its output into a part of the viewport.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .exceptions import InvalidSelectionParamsError


class Edge(Enum):
    """Edge of the content wrapped by a scrollable view."""

    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class SelectionArea:
    """Sub-area of the scrollable view where selection is allowed.

    Bounds are relative to the view height. Shrinking or moving the area
    changes where the selection lands without resizing the view itself.
    """

    ratio_from: float = 0.0
    ratio_to: float = 1.0

    def __post_init__(self) -> None:
        if self.ratio_from < 0.0 or self.ratio_to > 1.0:
            raise InvalidSelectionParamsError(
                f"Interval must be from range [0.0, 1.0], "
                f"but is [{self.ratio_from}, {self.ratio_to}]"
            )
        if self.ratio_from >= self.ratio_to:
            raise InvalidSelectionParamsError(
                f"Interval must not be empty, but is [{self.ratio_from}, {self.ratio_to}]"
            )

    def get_from_y(self, view_height: float) -> float:
        """Absolute start boundary (Y) of the area relative to the view."""
        return view_height * self.ratio_from

    def get_to_y(self, view_height: float) -> float:
        """Absolute end boundary (Y) of the area relative to the view."""
        return view_height * self.ratio_to

    def get_area_height(self, view_height: float) -> float:
        return self.get_to_y(view_height) - self.get_from_y(view_height)

    def covers_whole_view(self) -> bool:
        return self.ratio_from == 0.0 and self.ratio_to == 1.0

    def remap_for_view(self, ratio: Optional[float]) -> Optional[float]:
        """Remap a ratio from the space of this area into its enclosing view.

        After remapping, the Y coordinate of the selection within the view is
        simply ``view_height * remap_for_view(ratio)``.

        Args:
            ratio: Selection ratio relative to the area, or None

        Returns:
            Ratio relative to the whole view (None passes through)
        """
        if ratio is None:
            return None
        if self.covers_whole_view():
            return ratio
        return self.ratio_from + (self.ratio_to - self.ratio_from) * ratio

    def as_interval(self) -> tuple[float, float]:
        return (self.ratio_from, self.ratio_to)


@dataclass(frozen=True)
class SelectionParams:
    """Input parameters for the selection ratio solver.

    Immutable: to reconfigure, build a new instance and pass it to the next
    solve. Values are validated on construction.

    Attributes:
        top_perception_range: How far (px) the distance measure may look for
            the top content edge. Larger values give a smoother transition
            from ``selection_y_mid`` to the edge but cost more to measure.
        bottom_perception_range: Same as above for the bottom content edge.
        selection_y_mid: Ratio used when no edge is in range (0 = viewport
            top, 1 = viewport bottom).
        stiffness: 0 = maximal curvature, 1 = straight line.
        remapped_interval: Optional (from, to) interval the final ratio is
            scaled into instead of (0, 1).
    """

    top_perception_range: float = 2500
    bottom_perception_range: float = 2500
    selection_y_mid: float = 0.5
    stiffness: float = 0.6
    remapped_interval: Optional[tuple[float, float]] = None

    def __post_init__(self) -> None:
        if not self.top_perception_range > 0:
            raise InvalidSelectionParamsError(
                f"top_perception_range must be positive, got {self.top_perception_range}"
            )
        if not self.bottom_perception_range > 0:
            raise InvalidSelectionParamsError(
                f"bottom_perception_range must be positive, got {self.bottom_perception_range}"
            )
        if not 0.0 <= self.selection_y_mid <= 1.0:
            raise InvalidSelectionParamsError(
                f"selection_y_mid must be within [0, 1], got {self.selection_y_mid}"
            )
        if not 0.0 <= self.stiffness <= 1.0:
            raise InvalidSelectionParamsError(
                f"stiffness must be within [0, 1], got {self.stiffness}"
            )
        if self.remapped_interval is not None and len(self.remapped_interval) != 2:
            raise InvalidSelectionParamsError(
                f"remapped_interval must be a (from, to) pair, got {self.remapped_interval}"
            )

    @property
    def curvature(self) -> float:
        """Bezier control point offset derived from stiffness."""
        return 1.0 - self.stiffness

    def with_selection_area(self, area: SelectionArea) -> "SelectionParams":
        """Return new params whose output is remapped into the given area."""
        interval = None if area.covers_whole_view() else area.as_interval()
        return replace(self, remapped_interval=interval)
