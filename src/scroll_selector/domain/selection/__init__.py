"""
Selection domain module.

Computes the selection ratio of a scrollable list's viewport from the
distances to the content edges, and drives a selector with it on scroll.
"""

from .cubic import EPSILON, approximately, solve_roots
from .curve import bezier_point, curve, curve_point, find_t
from .exceptions import (
    InvalidCurveError,
    InvalidLayoutError,
    InvalidSelectionParamsError,
    SelectionError,
)
from .layout import ListLayout
from .measure import DistanceMeasure, ListDistanceMeasure, measure_for_params
from .models import Edge, SelectionArea, SelectionParams
from .selector import ScrollSelector, SelectionUpdate, Selector
from .solver import (
    blend_weights,
    compute_selection_ratio,
    curve_bottom,
    curve_middle,
    curve_top,
    remap_ratio,
)

__all__ = [
    # Models
    "Edge",
    "SelectionArea",
    "SelectionParams",
    "ListLayout",
    # Errors
    "SelectionError",
    "InvalidSelectionParamsError",
    "InvalidCurveError",
    "InvalidLayoutError",
    # Math
    "EPSILON",
    "approximately",
    "solve_roots",
    "bezier_point",
    "find_t",
    "curve",
    "curve_point",
    # Solver
    "curve_top",
    "curve_bottom",
    "curve_middle",
    "blend_weights",
    "remap_ratio",
    "compute_selection_ratio",
    # Measurement and selection
    "DistanceMeasure",
    "ListDistanceMeasure",
    "measure_for_params",
    "Selector",
    "ScrollSelector",
    "SelectionUpdate",
]
