from .math import Point, within_tolerance, is_finite_point
from .registries import CurveAlgorithm, curve_registry
from .points import ControlPointSet
from .prepare import prepare_sequence, straight_segments, split_channels
from .splines import CurveSampler, sample, get_sampler
from .modes import ModeController
from .session import EditorSession, RenderCache, RenderOutput
