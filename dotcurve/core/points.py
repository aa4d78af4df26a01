from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .math import Point, as_point, within_tolerance


@dataclass
class ControlPointSet:
    """
      - points: control points in click order (duplicates allowed)
    """
    points: list[Point] = field(default_factory=list)

    def __post_init__(self):
        self.points = [as_point(p) for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    # read-only views
    def as_points(self) -> Sequence[Point]:
        return tuple(self.points)

    def add(self, p: Point) -> "ControlPointSet":
        self.points.append(as_point(p))
        return self

    def index_near(self, query: Point, tol_x: float = 10.0, tol_y: float = 10.0) -> int | None:
        for i, p in enumerate(self.points):
            if within_tolerance(p, query, tol_x, tol_y):
                return i
        return None

    def remove_near(self, query: Point, tol_x: float = 10.0, tol_y: float = 10.0) -> Point | None:
        """
        Remove the first point (storage order) closer than tol_x/tol_y to
        `query` on both axes. Returns the removed point, or None if nothing
        was close enough.
        """
        idx = self.index_near(query, tol_x, tol_y)
        if idx is None:
            return None
        return self.points.pop(idx)

    def clear(self):
        self.points = []

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        return {"points": [list(p) for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict) -> "ControlPointSet":
        return cls(points=[tuple(map(float, p)) for p in data.get("points", [])])
