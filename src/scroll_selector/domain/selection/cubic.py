"""
Closed-form root finding for cubic Bezier components.

Converts Bernstein coefficients to the standard polynomial form and solves
with Cardano's method, falling back to quadratic/linear solutions when the
curve collapses to a lower degree. No iteration is involved, so the cost is
a fixed handful of floating point operations per call.
"""

import math

# Tolerance for treating a polynomial coefficient as zero
EPSILON = 1e-6

TAU = 2 * math.pi


def approximately(a: float, b: float) -> bool:
    """Check whether two values are equal within EPSILON."""
    return abs(a - b) < EPSILON


def solve_roots(x: float, p0: float, p1: float, p2: float, p3: float) -> list[float]:
    """Find parameter values t for which a cubic Bezier component equals x.

    Args:
        x: Target value of the curve component
        p0: First Bernstein coefficient (start point)
        p1: Second Bernstein coefficient (first control point)
        p2: Third Bernstein coefficient (second control point)
        p3: Fourth Bernstein coefficient (end point)

    Returns:
        Real roots (0 to 3 values), not restricted to [0, 1]. For three real
        roots the order follows the trigonometric branch (k = 0, 1, 2).

    Examples:
        >>> solve_roots(0.5, 0.0, 1 / 3, 2 / 3, 1.0)  # linear in disguise
        [0.5]
    """
    a = -p0 + 3 * p1 - 3 * p2 + p3
    b = 3 * p0 - 6 * p1 + 3 * p2
    c = -3 * p0 + 3 * p1
    d = p0 - x

    # Any Bezier curve may model a lower order curve, which is much
    # easier (and safer) to root-find.
    if approximately(a, 0.0):
        if approximately(b, 0.0):
            if approximately(c, 0.0):
                # Constant curve: no solutions
                return []
            return [-d / c]
        return _solve_quadratic(b, c, d)

    return _solve_depressed_cubic(b / a, c / a, d / a)


def _solve_quadratic(b: float, c: float, d: float) -> list[float]:
    """Solve b*t^2 + c*t + d = 0, returning no roots for a negative discriminant."""
    discriminant = c * c - 4 * b * d
    if discriminant < 0:
        return []
    q = math.sqrt(discriminant)
    b2 = 2 * b
    return [(q - c) / b2, (-c - q) / b2]


def _solve_depressed_cubic(b: float, c: float, d: float) -> list[float]:
    """Solve t^3 + b*t^2 + c*t + d = 0 via the depressed cubic t = u - b/3."""
    b3 = b / 3
    p = (3 * c - b * b) / 3
    p3 = p / 3
    q = (2 * b * b * b - 9 * b * c + 27 * d) / 27
    q2 = q / 2
    discriminant = q2 * q2 + p3 * p3 * p3

    if discriminant < 0:
        # Three real roots. Complex arithmetic is avoided by going through
        # the trigonometric form.
        mp3 = -p / 3
        r = math.sqrt(mp3 * mp3 * mp3)
        cosphi = max(-1.0, min(1.0, -q / (2 * r)))
        phi = math.acos(cosphi)
        t1 = 2 * math.cbrt(r)
        return [
            t1 * math.cos(phi / 3) - b3,
            t1 * math.cos((phi + TAU) / 3) - b3,
            t1 * math.cos((phi + 2 * TAU) / 3) - b3,
        ]

    if discriminant == 0:
        # Repeated root
        u1 = math.cbrt(-q2) if q2 < 0 else -math.cbrt(q2)
        return [2 * u1 - b3, -u1 - b3]

    # One real root
    sd = math.sqrt(discriminant)
    u1 = math.cbrt(-q2 + sd)
    v1 = math.cbrt(q2 + sd)
    return [u1 - v1 - b3]
