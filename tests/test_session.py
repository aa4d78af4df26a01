from dotcurve.core import CurveAlgorithm, EditorSession, RenderOutput


def _fill(session, pts=((30, 40), (10, 20), (50, 5))):
    for p in pts:
        session.add_point(p)


class TestRenderCache:
    def test_render_is_memoized(self, session):
        _fill(session)
        first = session.render(200, 100)
        assert session.render(200, 100) is first
        assert not session.cache.is_dirty

    def test_mutation_invalidates(self, session):
        _fill(session)
        first = session.render(200, 100)
        session.add_point((70, 70))
        assert session.cache.is_dirty
        assert session.render(200, 100) is not first

    def test_resize_rebuilds(self, session):
        _fill(session)
        session.toggle_straight()
        small = session.render(200, 100)
        large = session.render(400, 100)
        assert small is not large
        assert large.prepared[-1] == (400.0, 5.0)

    def test_mode_change_invalidates(self, session):
        _fill(session)
        session.render(200, 100)
        session.toggle_straight()
        assert session.cache.is_dirty


class TestRender:
    def test_empty(self, session):
        assert session.render(200, 100) == RenderOutput()

    def test_dots_only_without_modes(self, session):
        _fill(session)
        out = session.render(200, 100)
        assert out.dots == ((30.0, 40.0), (10.0, 20.0), (50.0, 5.0))
        assert out.prepared == ()
        assert out.straight_segments == ()
        assert out.curve == ()

    def test_straight_mode(self, session):
        _fill(session)
        session.toggle_straight()
        out = session.render(200, 100)
        assert len(out.prepared) == 5
        assert len(out.straight_segments) == 4
        assert out.curve == ()

    def test_curve_mode(self, small_session):
        _fill(small_session)
        assert small_session.cycle_curve() is CurveAlgorithm.CATMULL_ROM
        out = small_session.render(200, 100)
        assert len(out.curve) == 20
        assert out.straight_segments == ()

    def test_both_modes(self, small_session):
        _fill(small_session)
        small_session.toggle_straight()
        small_session.cycle_curve()
        out = small_session.render(200, 100)
        assert out.straight_segments and out.curve

    def test_render_is_repeatable(self, session):
        _fill(session)
        session.cycle_curve()
        a = session.render(200, 100)
        session.cache.invalidate()
        b = session.render(200, 100)
        assert a == b


class TestEvents:
    def test_click_adds(self, session):
        session.click((5, 5))
        assert session.points.as_points() == ((5.0, 5.0),)

    def test_click_in_delete_mode_removes(self, session):
        _fill(session)
        session.toggle_delete()
        session.click((12, 18))
        assert (10.0, 20.0) not in session.points.as_points()
        assert len(session.points) == 2

    def test_delete_miss_keeps_cache(self, session):
        _fill(session)
        session.render(200, 100)
        assert session.remove_near((500, 500)) is None
        assert not session.cache.is_dirty

    def test_clear_resets_everything(self, session):
        _fill(session)
        session.toggle_straight()
        session.toggle_delete()
        session.cycle_curve()
        session.clear()
        assert len(session.points) == 0
        assert not session.modes.straight
        assert session.modes.curve is None
        assert not session.modes.delete_mode

    def test_curve_needs_two_points(self, session):
        session.add_point((1, 1))
        assert session.cycle_curve() is None
        session.add_point((2, 2))
        assert session.cycle_curve() is CurveAlgorithm.CATMULL_ROM

    def test_subscribers_are_notified(self, session):
        calls = []
        session.subscribe(lambda: calls.append(1))
        session.add_point((1, 1))
        session.toggle_straight()
        assert len(calls) == 2
        session.unsubscribe(calls.append)  # unknown callback is ignored
