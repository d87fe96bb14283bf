"""
Selection ratio computation.

The selection ratio is a real value from (0, 1) that defines which part of
the viewport of a scrollable list to select:

* 0.0 - the top edge of the viewport
* 0.5 - the middle of the viewport
* 1.0 - the bottom edge of the viewport

It is derived from the distances to the content edges. Near the top edge
the ratio follows the top curve down to 0, near the bottom edge it follows
the bottom curve up to 1, and with both edges in range the two curves are
blended. The interval can be rescaled via ``SelectionParams.remapped_interval``.

Every function here is pure; the individual curve components are public to
make debugging and plotting easier.
"""

import math
from typing import Optional

from .curve import curve
from .models import SelectionParams


def curve_top(params: SelectionParams, x: float) -> Optional[float]:
    """Top curve: rises from 0 at the top edge to ``selection_y_mid``."""
    return curve(
        params.top_perception_range,
        params.selection_y_mid,
        params.curvature,
        x,
    )


def curve_bottom(params: SelectionParams, x: float) -> Optional[float]:
    """Bottom curve: rises from 0 to ``1 - selection_y_mid`` at the bottom edge.

    ``x`` is measured from the far end of the bottom perception range, i.e.
    ``bottom_perception_range - bottom_distance``.
    """
    return curve(
        params.bottom_perception_range,
        1.0 - params.selection_y_mid,
        params.curvature,
        x,
    )


def blend_weights(
    params: SelectionParams, top_distance: float, bottom_distance: float
) -> Optional[tuple[float, float]]:
    """Compute the (top, bottom) weights of the curve blend.

    The raw top weight is 1 before the overlap window, 0 after it and falls
    linearly inside it. Both raw weights are eased with a square root, which
    slows the crossfade near the window edges.

    Returns:
        Tuple of (top_weight, bottom_weight), or None if the overlap window is
        empty (both distances are 0, so there is nothing to scroll)
    """
    x = top_distance
    total_width = top_distance + bottom_distance
    weight_from = max(0.0, total_width - params.bottom_perception_range)
    weight_to = min(params.top_perception_range, total_width)
    weight_dist = weight_to - weight_from

    if x < weight_from:
        top_raw = 1.0
    elif x > weight_to:
        top_raw = 0.0
    elif weight_dist <= 0:
        return None
    else:
        top_raw = 1.0 - (x - weight_from) / weight_dist

    return math.sqrt(top_raw), math.sqrt(1.0 - top_raw)


def curve_middle(
    params: SelectionParams, top_distance: float, bottom_distance: float
) -> Optional[float]:
    """Blend the top and bottom curves when both edge distances are known.

    Returns:
        Blended ratio, or None if either curve cannot be evaluated
    """
    top_y = curve_top(params, top_distance)
    bottom_y = curve_bottom(params, params.bottom_perception_range - bottom_distance)
    if top_y is None or bottom_y is None:
        return None

    weights = blend_weights(params, top_distance, bottom_distance)
    if weights is None:
        return params.selection_y_mid
    top_weight, bottom_weight = weights

    top_y_shifted = top_y - params.selection_y_mid
    return top_y_shifted * top_weight + bottom_y * bottom_weight + params.selection_y_mid


def remap_ratio(
    ratio: Optional[float], interval: Optional[tuple[float, float]]
) -> Optional[float]:
    """Scale a (0, 1) ratio into ``interval``.

    Without an interval the ratio is returned unchanged; None is never remapped.
    """
    if ratio is None:
        return None
    if interval is None:
        return ratio
    ratio_from, ratio_to = interval
    return ratio_from + (ratio_to - ratio_from) * ratio


def compute_selection_ratio(
    params: SelectionParams,
    top_distance: Optional[float],
    bottom_distance: Optional[float],
) -> Optional[float]:
    """Compute the selection ratio of the viewport.

    Args:
        params: Solver parameters
        top_distance: Distance (px) to scroll the view to the very top, or
            None if the top is too far to be measured (typical for large lists)
        bottom_distance: Distance (px) to scroll the view to the very bottom,
            or None if it is too far to be measured

    Returns:
        The selection ratio (remapped if the params define an interval), or
        None if no decision is possible

    Examples:
        >>> compute_selection_ratio(SelectionParams(), None, None)
        0.5
    """
    if top_distance is not None and bottom_distance is not None:
        ratio = curve_middle(params, top_distance, bottom_distance)
    elif top_distance is not None:
        ratio = curve_top(params, top_distance)
    elif bottom_distance is not None:
        bottom_y = curve_bottom(params, params.bottom_perception_range - bottom_distance)
        ratio = None if bottom_y is None else bottom_y + params.selection_y_mid
    else:
        ratio = params.selection_y_mid

    return remap_ratio(ratio, params.remapped_interval)
