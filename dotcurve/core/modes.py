from dataclasses import dataclass, field
from typing import Iterable

from dotcurve.config import DEFAULT_CURVE_CYCLE
from .registries import CurveAlgorithm


@dataclass
class ModeController:
    """
    Two independent mode axes plus the delete toggle:
      - straight: draw straight connectors between sorted points
      - curve: active curve algorithm, None when off
      - delete_mode: clicks remove the nearest point instead of adding one

    `curve` cycles None -> cycle[0] -> ... -> cycle[-1] -> None.
    """
    cycle: tuple[CurveAlgorithm, ...] = field(
        default_factory=lambda: tuple(CurveAlgorithm(v) for v in DEFAULT_CURVE_CYCLE)
    )
    min_curve_points: int = 2
    straight: bool = False
    curve: CurveAlgorithm | None = None
    delete_mode: bool = False

    @classmethod
    def from_names(cls, names: Iterable[str], min_curve_points: int = 2) -> "ModeController":
        return cls(cycle=tuple(CurveAlgorithm(n) for n in names), min_curve_points=min_curve_points)

    def toggle_straight(self) -> bool:
        self.straight = not self.straight
        return self.straight

    def curve_enabled(self, point_count: int) -> bool:
        return point_count >= self.min_curve_points

    def next_curve(self) -> CurveAlgorithm | None:
        if self.curve is None or self.curve not in self.cycle:
            return self.cycle[0]
        i = self.cycle.index(self.curve)
        return self.cycle[i + 1] if i + 1 < len(self.cycle) else None

    def cycle_curve(self, point_count: int) -> bool:
        """Advance the curve algorithm. Returns False (no change) while disabled."""
        if not self.curve_enabled(point_count):
            return False
        self.curve = self.next_curve()
        return True

    def toggle_delete(self) -> bool:
        self.delete_mode = not self.delete_mode
        return self.delete_mode

    def reset(self):
        self.straight = False
        self.curve = None
        self.delete_mode = False

    @property
    def drawing_active(self) -> bool:
        return self.straight or self.curve is not None

    # ---- button captions ----------------------------------------------------
    def straight_label(self) -> str:
        return "Straight: On" if self.straight else "Straight: Off"

    def curve_label(self, point_count: int) -> str:
        if not self.curve_enabled(point_count):
            return "Curve: Disabled"
        if self.curve is None:
            return "Curve: Off"
        return f"Curve: {self.curve.label}"

    def delete_label(self) -> str:
        return "Delete: On" if self.delete_mode else "Delete: Off"
