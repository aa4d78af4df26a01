from enum import Enum
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .splines import CurveSampler


class CurveAlgorithm(Enum):
    CATMULL_ROM = "catmull-rom"
    CENTRIPETAL = "centripetal"
    BEZIER = "bezier"
    MONOTONE_HERMITE = "monotone-hermite"
    NATURAL_CUBIC = "natural-cubic"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    CurveAlgorithm.CATMULL_ROM: "Catmull-Rom",
    CurveAlgorithm.CENTRIPETAL: "Centripetal",
    CurveAlgorithm.BEZIER: "Linear",
    CurveAlgorithm.MONOTONE_HERMITE: "Monotone",
    CurveAlgorithm.NATURAL_CUBIC: "Natural Cubic",
}

curve_registry: dict[CurveAlgorithm, type["CurveSampler"]] = {}


def register_curve(algorithm: CurveAlgorithm):
    def _decorator(cls: type["CurveSampler"]) -> type["CurveSampler"]:
        if not isinstance(algorithm, CurveAlgorithm) or algorithm in curve_registry:
            raise ValueError(f"Invalid or duplicate curve algorithm '{algorithm}'")
        curve_registry[algorithm] = cls
        return cls
    return _decorator
