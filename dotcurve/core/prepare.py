from typing import Sequence

from .math import Point


def prepare_sequence(points: Sequence[Point], surface_width: float) -> list[Point]:
    """
    Build the sequence fed to interpolation:
      - stable sort by x
      - add a phantom at x=0 holding the first point's y and one at
        x=surface_width holding the last point's y
      - stable sort again

    Empty input gives an empty sequence. Ties on x keep their original order.
    """
    if not points:
        return []
    ordered = sorted(points, key=lambda p: p[0])
    first, last = ordered[0], ordered[-1]
    ordered.append((0.0, first[1]))
    ordered.append((float(surface_width), last[1]))
    ordered.sort(key=lambda p: p[0])
    return ordered


def straight_segments(prepared: Sequence[Point]) -> list[tuple[Point, Point]]:
    return list(zip(prepared, prepared[1:]))


def split_channels(pts: Sequence[Point]) -> tuple[list[float], list[float]]:
    return [float(p[0]) for p in pts], [float(p[1]) for p in pts]
