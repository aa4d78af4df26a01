import math

Point = tuple[float, float]


def within_tolerance(a: Point, b: Point, tol_x: float, tol_y: float) -> bool:
    """
    Axis-wise proximity test: strictly closer than tol_x horizontally
    AND strictly closer than tol_y vertically.
    """
    return abs(a[0] - b[0]) < tol_x and abs(a[1] - b[1]) < tol_y


def is_finite_point(p: Point) -> bool:
    return math.isfinite(p[0]) and math.isfinite(p[1])


def as_point(p) -> Point:
    x, y = p
    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        raise TypeError("point coordinates must be numbers.")
    return float(x), float(y)


def ieee_div(a: float, b: float) -> float:
    """
    Float division that follows IEEE semantics instead of raising:
    x/0 -> +-inf, 0/0 -> nan.
    """
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    sign = math.copysign(1.0, a) * math.copysign(1.0, b)
    return math.copysign(math.inf, sign)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t
