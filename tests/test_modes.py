import pytest

from dotcurve.core import CurveAlgorithm, ModeController


class TestCurveCycle:
    def test_full_default_cycle(self):
        modes = ModeController()
        seen = []
        for _ in range(6):
            modes.cycle_curve(point_count=3)
            seen.append(modes.curve)
        assert seen == [
            CurveAlgorithm.CATMULL_ROM,
            CurveAlgorithm.CENTRIPETAL,
            CurveAlgorithm.BEZIER,
            CurveAlgorithm.MONOTONE_HERMITE,
            CurveAlgorithm.NATURAL_CUBIC,
            None,
        ]

    def test_two_step_cycle(self):
        modes = ModeController.from_names(["bezier", "catmull-rom"])
        modes.cycle_curve(2)
        assert modes.curve is CurveAlgorithm.BEZIER
        modes.cycle_curve(2)
        assert modes.curve is CurveAlgorithm.CATMULL_ROM
        modes.cycle_curve(2)
        assert modes.curve is None

    def test_disabled_below_minimum(self):
        modes = ModeController()
        assert modes.cycle_curve(point_count=1) is False
        assert modes.curve is None

    def test_stricter_minimum(self):
        modes = ModeController(min_curve_points=4)
        assert not modes.curve_enabled(3)
        assert modes.cycle_curve(4) is True

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            ModeController.from_names(["spirograph"])


def test_toggle_straight():
    modes = ModeController()
    assert modes.toggle_straight() is True
    assert modes.toggle_straight() is False


def test_drawing_active():
    modes = ModeController()
    assert not modes.drawing_active
    modes.toggle_straight()
    assert modes.drawing_active
    modes.toggle_straight()
    modes.cycle_curve(2)
    assert modes.drawing_active


def test_reset():
    modes = ModeController()
    modes.toggle_straight()
    modes.toggle_delete()
    modes.cycle_curve(5)
    modes.reset()
    assert (modes.straight, modes.curve, modes.delete_mode) == (False, None, False)


def test_labels():
    modes = ModeController()
    assert modes.straight_label() == "Straight: Off"
    assert modes.curve_label(1) == "Curve: Disabled"
    assert modes.curve_label(2) == "Curve: Off"
    assert modes.delete_label() == "Delete: Off"

    modes.toggle_straight()
    modes.toggle_delete()
    modes.cycle_curve(2)
    assert modes.straight_label() == "Straight: On"
    assert modes.curve_label(2) == "Curve: Catmull-Rom"
    assert modes.delete_label() == "Delete: On"
