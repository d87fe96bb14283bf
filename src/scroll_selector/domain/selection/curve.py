"""
Monotone easing curve built from a cubic Bezier.

The curve runs from (0, 0) to (width, height) with control points
P1 = (curvature * width, 0) and P2 = (width - curvature * width, height).
For curvature within [0, 1] the X component never decreases in t, so the
parametric Bezier can be read as a function y = f(x):

* f is continuous
* f(0) = 0 and f(width) = height
* f is monotone, so linear combinations of such curves stay monotone
"""

from typing import Optional

from .cubic import EPSILON, solve_roots
from .exceptions import InvalidCurveError


def _check_curve(width: float, curvature: float) -> None:
    if not width > 0:
        raise InvalidCurveError(f"Curve width must be positive, got {width}")
    if not 0.0 <= curvature <= 1.0:
        raise InvalidCurveError(f"Curvature must be within [0, 1], got {curvature}")


def bezier_point(
    width: float, height: float, curvature: float, t: float
) -> tuple[float, float]:
    """Evaluate the curve at parameter t.

    B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3
    """
    x1 = curvature * width
    x2 = width - curvature * width

    mt = 1 - t
    w1 = 3 * mt * mt * t
    w2 = 3 * mt * t * t
    w3 = t * t * t

    # P0 is the origin and P1 sits on the X axis, so they drop out of y
    x = w1 * x1 + w2 * x2 + w3 * width
    y = w2 * height + w3 * height
    return x, y


def find_t(width: float, curvature: float, x: float) -> Optional[float]:
    """Find the curve parameter t in [0, 1] whose X component equals x.

    Roots are scanned in solver order and the first one inside [0, 1] wins.
    Multiple roots inside the interval only show up for numerically
    degenerate curves, where this is an accepted approximation. Roots within
    EPSILON of the interval are clamped into it, so the curve end points
    survive floating point noise.

    Returns:
        The parameter t, or None if x is outside the curve's domain
    """
    roots = solve_roots(x, 0.0, curvature * width, width - curvature * width, width)
    for t in roots:
        if -EPSILON <= t <= 1.0 + EPSILON:
            return min(1.0, max(0.0, t))
    return None


def curve_point(
    width: float, height: float, curvature: float, x: float
) -> Optional[tuple[float, float]]:
    """Compute the (x, y) point of the curve at horizontal offset x.

    Raises:
        InvalidCurveError: If width is not positive or curvature is outside [0, 1]
    """
    _check_curve(width, curvature)
    t = find_t(width, curvature, x)
    if t is None:
        return None
    return bezier_point(width, height, curvature, t)


def curve(width: float, height: float, curvature: float, x: float) -> Optional[float]:
    """Compute y = f(x) of the easing curve.

    Args:
        width: Horizontal extent of the curve (must be positive)
        height: Value reached at x = width (may be negative)
        curvature: Control point offset; 0 gives a straight line
        x: Horizontal offset to evaluate

    Returns:
        Curve value at x, or None when x lies outside [0, width]

    Examples:
        >>> round(curve(100.0, 1.0, 0.0, 25.0), 6)  # straight line
        0.25
    """
    point = curve_point(width, height, curvature, x)
    if point is None:
        return None
    return point[1]
