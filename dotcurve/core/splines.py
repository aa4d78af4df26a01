import logging
from abc import ABC, abstractmethod
from typing import Sequence, override

from dotcurve.config import SamplingConfig, DEFAULT_SAMPLING
from .interpolation import (
    catmull_rom, cubic_bezier, centripetal_catmull_rom, gather_window,
    hermite, monotone_tangents, natural_spline_coefficients, eval_cubic,
)
from .math import Point, is_finite_point, lerp
from .prepare import split_channels
from .registries import CurveAlgorithm, curve_registry, register_curve

logger = logging.getLogger(__name__)


class CurveSampler(ABC):
    """
    GUI-agnostic curve strategy: turns a prepared point sequence into a
    dense polyline. Implementations hold no state between calls.
    """
    min_points: int = 2

    def sample(self, pts: Sequence[Point], config: SamplingConfig = DEFAULT_SAMPLING, /) -> list[Point]:
        if len(pts) < self.min_points:
            return []
        xs, ys = split_channels(pts)
        out: list[Point] = []
        dropped = 0
        for p in self._samples(xs, ys, config):
            if is_finite_point(p):
                out.append(p)
            else:
                dropped += 1
        if dropped:
            logger.debug("%s: dropped %d non-finite samples", type(self).__name__, dropped)
        return out

    @abstractmethod
    def _samples(self, xs: list[float], ys: list[float], config: SamplingConfig, /):
        """
        Yield (x, y) samples from parallel coordinate channels (len >= min_points).
        """


class UniformSampler(CurveSampler):
    """
    Shared driver for the four-point window samplers: `uniform_samples`
    global steps over t in [0, 1], each mapped to a segment and a local t.
    """

    @abstractmethod
    def evaluate(self, t: float, p0: float, p1: float, p2: float, p3: float, config: SamplingConfig, /) -> float:
        """Value of one channel at local t."""

    @override
    def _samples(self, xs, ys, config, /):
        total = config.uniform_samples
        for i in range(total):
            t = i / (total - 1)
            _, local_t, wx = gather_window(xs, t)
            _, _, wy = gather_window(ys, t)
            yield (self.evaluate(local_t, *wx, config),
                   self.evaluate(local_t, *wy, config))


@register_curve(CurveAlgorithm.CATMULL_ROM)
class CatmullRomSampler(UniformSampler):
    @override
    def evaluate(self, t, p0, p1, p2, p3, config, /):
        return catmull_rom(t, p0, p1, p2, p3)


@register_curve(CurveAlgorithm.BEZIER)
class BezierSampler(UniformSampler):
    """Cubic Bernstein blend of the same four-point window."""

    @override
    def evaluate(self, t, p0, p1, p2, p3, config, /):
        return cubic_bezier(t, p0, p1, p2, p3)


@register_curve(CurveAlgorithm.CENTRIPETAL)
class CentripetalSampler(UniformSampler):
    def __init__(self, alpha: float | None = None):
        self.alpha = alpha

    @override
    def evaluate(self, t, p0, p1, p2, p3, config, /):
        alpha = config.centripetal_alpha if self.alpha is None else self.alpha
        return centripetal_catmull_rom(
            t, p0, p1, p2, p3,
            alpha=alpha,
            chord_epsilon=config.chord_epsilon,
            knot_epsilon=config.knot_epsilon,
        )


@register_curve(CurveAlgorithm.MONOTONE_HERMITE)
class MonotoneHermiteSampler(CurveSampler):
    """
    y as a monotone piecewise cubic of x: x advances linearly across each
    segment, y follows the Fritsch-Carlson corrected Hermite cubic.
    """

    @override
    def _samples(self, xs, ys, config, /):
        tangents = monotone_tangents(xs, ys)
        steps = config.hermite_steps
        for i in range(len(xs) - 1):
            h = xs[i + 1] - xs[i]
            for j in range(steps):
                t = j / steps
                yield (lerp(xs[i], xs[i + 1], t),
                       hermite(t, ys[i], ys[i + 1], tangents[i], tangents[i + 1], h))
        yield xs[-1], ys[-1]


@register_curve(CurveAlgorithm.NATURAL_CUBIC)
class NaturalCubicSampler(CurveSampler):
    @override
    def _samples(self, xs, ys, config, /):
        cx = natural_spline_coefficients(xs)
        cy = natural_spline_coefficients(ys)
        steps = config.natural_steps
        for seg_x, seg_y in zip(cx, cy):
            for j in range(steps):
                t = j / steps
                yield eval_cubic(seg_x, t), eval_cubic(seg_y, t)
        yield eval_cubic(cx[-1], 1.0), eval_cubic(cy[-1], 1.0)


def get_sampler(algorithm: CurveAlgorithm) -> CurveSampler:
    try:
        return curve_registry[algorithm]()
    except KeyError:
        raise KeyError(f"No sampler registered for {algorithm!r}") from None


def sample(pts: Sequence[Point], algorithm: CurveAlgorithm | None,
           config: SamplingConfig | None = None) -> list[Point]:
    """
    Single entry point of the interpolation engine. `algorithm=None` (curve
    mode off) and sequences shorter than two points both give [].
    """
    if algorithm is None or len(pts) < 2:
        return []
    return get_sampler(algorithm).sample(pts, config or DEFAULT_SAMPLING)
