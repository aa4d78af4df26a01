"""
Per-channel numeric routines.

Every function here works on plain floats (one coordinate channel) or lists
of floats; the samplers in `splines.py` run them once for x and once for y
with the same parameter.
"""
import math
from typing import Sequence

from .math import ieee_div

Coefficients = tuple[float, float, float, float]


# ---- uniform cubic bases ----------------------------------------------------
def catmull_rom(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    t2 = t * t
    t3 = t2 * t
    return 0.5 * (
        (2.0 * p1)
        + (-p0 + p2) * t
        + (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2
        + (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3
    )


def cubic_bezier(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    u = 1.0 - t
    uu = u * u
    tt = t * t
    return uu * u * p0 + 3.0 * uu * t * p1 + 3.0 * u * tt * p2 + tt * t * p3


def gather_window(values: Sequence[float], t: float) -> tuple[int, float, tuple[float, float, float, float]]:
    """
    Map a global parameter t in [0, 1] onto the control values.

    Returns (segment_index, local_t, (p0, p1, p2, p3)) where
      - segment_index = floor((n-1) * t)
      - local_t = (t * (n-1)) mod 1
      - p0 reuses p1 on the first segment, p2/p3 clamp to the last index.
    """
    n = len(values)
    scaled = t * (n - 1)
    seg = min(int(math.floor(scaled)), n - 1)
    local_t = scaled % 1.0
    p0 = values[seg] if seg == 0 else values[seg - 1]
    p1 = values[seg]
    p2 = values[min(seg + 1, n - 1)]
    p3 = values[min(seg + 2, n - 1)]
    return seg, local_t, (p0, p1, p2, p3)


# ---- centripetal Catmull-Rom ------------------------------------------------
def centripetal_catmull_rom(
        t: float, p0: float, p1: float, p2: float, p3: float,
        alpha: float = 0.5,
        chord_epsilon: float = 1e-9,
        knot_epsilon: float = 1e-12,
) -> float:
    """
    Non-uniform Catmull-Rom on one channel. Knots are spaced by the chord
    length raised to `alpha` (0.5 = centripetal, 0 = uniform), the chord being
    floored at `chord_epsilon`. The local t in [0, 1] is remapped to [t1, t2]
    and evaluated with the pyramidal (Barry-Goldman) construction.
    """
    def knot_step(a: float, b: float) -> float:
        return max(abs(b - a), chord_epsilon) ** alpha

    t0 = 0.0
    t1 = t0 + knot_step(p0, p1)
    t2 = t1 + knot_step(p1, p2)
    t3 = t2 + knot_step(p2, p3)

    # collapsed knots: nothing sensible to blend, stay on the anchor
    if (t1 - t0) < knot_epsilon or (t2 - t1) < knot_epsilon or (t3 - t2) < knot_epsilon:
        return p1

    u = t1 + (t2 - t1) * t

    a1 = (t1 - u) / (t1 - t0) * p0 + (u - t0) / (t1 - t0) * p1
    a2 = (t2 - u) / (t2 - t1) * p1 + (u - t1) / (t2 - t1) * p2
    a3 = (t3 - u) / (t3 - t2) * p2 + (u - t2) / (t3 - t2) * p3

    b1 = (t2 - u) / (t2 - t0) * a1 + (u - t0) / (t2 - t0) * a2
    b2 = (t3 - u) / (t3 - t1) * a2 + (u - t1) / (t3 - t1) * a3

    return (t2 - u) / (t2 - t1) * b1 + (u - t1) / (t2 - t1) * b2


# ---- cubic Hermite ----------------------------------------------------------
def hermite_basis(t: float) -> tuple[float, float, float, float]:
    t2 = t * t
    t3 = t2 * t
    h00 = 2.0 * t3 - 3.0 * t2 + 1.0
    h10 = t3 - 2.0 * t2 + t
    h01 = -2.0 * t3 + 3.0 * t2
    h11 = t3 - t2
    return h00, h10, h01, h11


def hermite(t: float, p0: float, p1: float, m0: float, m1: float, h: float = 1.0) -> float:
    """Cubic Hermite value on a segment of width h with end tangents m0, m1."""
    h00, h10, h01, h11 = hermite_basis(t)
    return h00 * p0 + h10 * h * m0 + h01 * p1 + h11 * h * m1


def monotone_tangents(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """
    Knot tangents for a monotone piecewise cubic Hermite interpolant.

    Tangents start as the mean of the adjacent secant slopes (one-sided at the
    ends) and are then corrected per segment (Fritsch-Carlson):
      - flat segment: both end tangents are zeroed
      - alpha^2 + beta^2 > 9: both tangents are scaled by 3 / sqrt(alpha^2 + beta^2)

    Zero spacing in x yields an infinite slope instead of raising. A knot
    next to such a vertical step gets a flat tangent, and the step itself is
    left out of the correction, so neighbouring segments keep their shape.
    """
    n = min(len(xs), len(ys))
    if n < 2:
        return []

    slopes = [ieee_div(ys[i + 1] - ys[i], xs[i + 1] - xs[i]) for i in range(n - 1)]

    tangents = [0.0] * n
    tangents[0] = slopes[0]
    tangents[-1] = slopes[-1]
    for i in range(1, n - 1):
        tangents[i] = (slopes[i - 1] + slopes[i]) * 0.5
    tangents = [m if math.isfinite(m) else 0.0 for m in tangents]

    for i, slope in enumerate(slopes):
        if not math.isfinite(slope):
            continue
        if slope == 0.0:
            tangents[i] = 0.0
            tangents[i + 1] = 0.0
            continue
        a = ieee_div(tangents[i], slope)
        b = ieee_div(tangents[i + 1], slope)
        r2 = a * a + b * b
        if r2 > 9.0:
            tau = 3.0 / math.sqrt(r2)
            tangents[i] = tau * tangents[i]
            tangents[i + 1] = tau * tangents[i + 1]
    return tangents


# ---- natural cubic spline ---------------------------------------------------
def natural_spline_coefficients(values: Sequence[float]) -> list[Coefficients]:
    """
    Fit a natural cubic spline (zero second derivative at both ends) through
    `values` and return one (a, b, c, d) tuple per segment, so that the
    segment reads a + b*t + c*t^2 + d*t^3 for t in [0, 1].

    Knot spacing is fixed at 1.0 whatever the distance between the points;
    the tridiagonal system is solved with the Thomas algorithm.
    """
    n = len(values) - 1
    if n < 1:
        return []

    a = [float(v) for v in values]
    h = [1.0] * n

    rhs = [0.0] * (n + 1)
    for i in range(1, n):
        rhs[i] = 3.0 / h[i] * (a[i + 1] - a[i]) - 3.0 / h[i - 1] * (a[i] - a[i - 1])

    # forward sweep
    diag = [1.0] + [0.0] * n
    mu = [0.0] * (n + 1)
    z = [0.0] * (n + 1)
    for i in range(1, n):
        diag[i] = 2.0 * (h[i - 1] + h[i]) - h[i - 1] * mu[i - 1]
        mu[i] = h[i] / diag[i]
        z[i] = (rhs[i] - h[i - 1] * z[i - 1]) / diag[i]

    # back substitution
    c = [0.0] * (n + 1)
    b = [0.0] * n
    d = [0.0] * n
    for j in range(n - 1, -1, -1):
        c[j] = z[j] - mu[j] * c[j + 1]
        b[j] = (a[j + 1] - a[j]) / h[j] - h[j] * (c[j + 1] + 2.0 * c[j]) / 3.0
        d[j] = (c[j + 1] - c[j]) / (3.0 * h[j])

    return [(a[j], b[j], c[j], d[j]) for j in range(n)]


def eval_cubic(coeffs: Coefficients, t: float) -> float:
    a, b, c, d = coeffs
    return a + t * (b + t * (c + t * d))
