"""
Configuration
=============
Central place for the tunable constants of the curve engine and the editor.

Exports:
    SamplingConfig: sample densities and numeric guards of the interpolation engine.
    EditorConfig: interaction tolerances, curve cycle and drawing sizes.
    DEFAULT_SAMPLING, DEFAULT_EDITOR: the defaults used when nothing is passed.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SamplingConfig:
    """
    Sample counts of the interpolation engine:
      - uniform_samples: global steps for the Catmull-Rom / Bezier / centripetal samplers
      - hermite_steps: steps per segment for the monotone Hermite sampler
      - natural_steps: steps per segment for the natural cubic sampler
    """
    uniform_samples: int = 200
    hermite_steps: int = 100
    natural_steps: int = 50
    centripetal_alpha: float = 0.5
    chord_epsilon: float = 1e-9
    knot_epsilon: float = 1e-12

    def __post_init__(self):
        for name in ("uniform_samples", "hermite_steps", "natural_steps"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.uniform_samples < 2:
            raise ValueError("uniform_samples must be at least 2")
        if not 0.0 <= self.centripetal_alpha <= 1.0:
            raise ValueError("centripetal_alpha must be in [0, 1]")
        if self.chord_epsilon <= 0.0 or self.knot_epsilon <= 0.0:
            raise ValueError("epsilons must be positive")


# values of dotcurve.core.registries.CurveAlgorithm, in cycling order
DEFAULT_CURVE_CYCLE: tuple[str, ...] = (
    "catmull-rom",
    "centripetal",
    "bezier",
    "monotone-hermite",
    "natural-cubic",
)


@dataclass(frozen=True)
class EditorConfig:
    remove_tolerance: tuple[float, float] = (10.0, 10.0)
    min_curve_points: int = 2
    curve_cycle: tuple[str, ...] = DEFAULT_CURVE_CYCLE
    sampling: SamplingConfig = field(default_factory=SamplingConfig)

    # drawing
    grid_spacing: int = 50
    dot_radius: float = 5.0
    stroke_width: float = 2.0
    canvas_size: tuple[int, int] = (800, 600)

    def __post_init__(self):
        if not self.curve_cycle:
            raise ValueError("curve_cycle must contain at least one algorithm")
        if len(set(self.curve_cycle)) != len(self.curve_cycle):
            raise ValueError("curve_cycle contains duplicate algorithms")
        if self.min_curve_points < 2:
            raise ValueError("min_curve_points must be >= 2")
        if self.remove_tolerance[0] <= 0 or self.remove_tolerance[1] <= 0:
            raise ValueError("remove_tolerance must be positive on both axes")
        if self.grid_spacing < 1:
            raise ValueError("grid_spacing must be >= 1")


DEFAULT_SAMPLING = SamplingConfig()
DEFAULT_EDITOR = EditorConfig()
