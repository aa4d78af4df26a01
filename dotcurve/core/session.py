import logging
from dataclasses import dataclass
from typing import Callable

from dotcurve.config import EditorConfig, DEFAULT_EDITOR
from .math import Point
from .modes import ModeController
from .points import ControlPointSet
from .prepare import prepare_sequence, straight_segments
from .registries import CurveAlgorithm
from .splines import sample

logger = logging.getLogger(__name__)

Size = tuple[float, float]


@dataclass(frozen=True)
class RenderOutput:
    dots: tuple[Point, ...] = ()
    prepared: tuple[Point, ...] = ()
    straight_segments: tuple[tuple[Point, Point], ...] = ()
    curve: tuple[Point, ...] = ()


class RenderCache:
    """
    Dirty flag + memoized RenderOutput. A stored output is only served back
    for the surface size it was built for.
    """

    def __init__(self):
        self._output: RenderOutput | None = None
        self._size: Size | None = None

    @property
    def is_dirty(self) -> bool:
        return self._output is None

    def invalidate(self):
        self._output = None
        self._size = None

    def get(self, size: Size) -> RenderOutput | None:
        if self._output is None or self._size != size:
            return None
        return self._output

    def store(self, size: Size, output: RenderOutput):
        self._size = size
        self._output = output


class EditorSession:
    """
    Owns the control points, the mode flags and the render cache. Every
    mutation invalidates the cache and notifies subscribers; geometry is
    rebuilt lazily by `render`.
    """

    def __init__(self, config: EditorConfig = DEFAULT_EDITOR):
        self.config = config
        self.points = ControlPointSet()
        self.modes = ModeController.from_names(config.curve_cycle, config.min_curve_points)
        self.cache = RenderCache()
        self._listeners: list[Callable[[], None]] = []

    # ---- observers ------------------------------------------------------------
    def subscribe(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self, reason: str):
        self.cache.invalidate()
        logger.debug("session changed (%s): %d points, straight=%s, curve=%s",
                     reason, len(self.points), self.modes.straight, self.modes.curve)
        for cb in list(self._listeners):
            cb()

    # ---- events ---------------------------------------------------------------
    def add_point(self, p: Point):
        self.points.add(p)
        self._changed("add")

    def remove_near(self, query: Point) -> Point | None:
        tol_x, tol_y = self.config.remove_tolerance
        removed = self.points.remove_near(query, tol_x, tol_y)
        if removed is not None:
            self._changed("remove")
        return removed

    def click(self, p: Point):
        """Canvas click: add a point, or remove the one under it in delete mode."""
        if self.modes.delete_mode:
            self.remove_near(p)
        else:
            self.add_point(p)

    def clear(self):
        self.points.clear()
        self.modes.reset()
        self._changed("clear")

    def toggle_straight(self) -> bool:
        state = self.modes.toggle_straight()
        self._changed("straight")
        return state

    def cycle_curve(self) -> CurveAlgorithm | None:
        if self.modes.cycle_curve(len(self.points)):
            self._changed("curve")
        return self.modes.curve

    def toggle_delete(self) -> bool:
        state = self.modes.toggle_delete()
        self._changed("delete")
        return state

    # ---- rendering ------------------------------------------------------------
    def render(self, width: float, height: float) -> RenderOutput:
        size = (float(width), float(height))
        cached = self.cache.get(size)
        if cached is not None:
            return cached
        output = self._build(size)
        self.cache.store(size, output)
        return output

    def _build(self, size: Size) -> RenderOutput:
        dots = self.points.as_points()
        if not dots or not self.modes.drawing_active:
            return RenderOutput(dots=dots)

        prepared = prepare_sequence(dots, size[0])
        segments = straight_segments(prepared) if self.modes.straight else []
        curve = sample(prepared, self.modes.curve, self.config.sampling)
        logger.debug("rebuilt geometry: %d prepared, %d segments, %d curve samples",
                     len(prepared), len(segments), len(curve))
        return RenderOutput(
            dots=dots,
            prepared=tuple(prepared),
            straight_segments=tuple(segments),
            curve=tuple(curve),
        )
