import pytest

from mandelview.viewport import Viewport, ViewportController


def test_defaults():
    controller = ViewportController()
    assert controller.viewport == Viewport(complex(-2, -1.5), complex(2, 1.5))
    assert controller.max_iter == 200


def test_degenerate_viewport_rejected():
    with pytest.raises(ValueError):
        ViewportController(Viewport(0j, complex(1, 0)))


def test_zero_depth_rejected():
    with pytest.raises(ValueError):
        ViewportController(max_iter=0)


def test_viewport_validity():
    assert Viewport(0j, complex(1, 1)).is_valid()
    assert not Viewport(0j, complex(0, 1)).is_valid()
    assert not Viewport(0j, complex(float("inf"), 1)).is_valid()


class TestZoom:

    def test_zoom_in_at_centre_shrinks_symmetrically(self):
        controller = ViewportController()
        assert controller.zoom_in(400, 300, (800, 600))
        tl, br = controller.viewport.top_left, controller.viewport.bottom_right
        assert tl.real == pytest.approx(-1.8)
        assert tl.imag == pytest.approx(-1.35)
        assert br.real == pytest.approx(1.8)
        assert br.imag == pytest.approx(1.35)

    def test_zoom_in_at_corner_keeps_that_corner(self):
        controller = ViewportController()
        controller.zoom_in(0, 0, (800, 600))
        tl, br = controller.viewport.top_left, controller.viewport.bottom_right
        assert tl == complex(-2, -1.5)
        assert br.real == pytest.approx(1.6)
        assert br.imag == pytest.approx(1.2)

    def test_zoom_in_is_a_step_not_a_recentre(self):
        controller = ViewportController()
        controller.zoom_in(600, 150, (800, 600))
        centre = (controller.viewport.top_left + controller.viewport.bottom_right) / 2
        # the clicked point is (1, -0.75); the centre only moves a tenth of the way
        assert centre.real == pytest.approx(0.1)
        assert centre.imag == pytest.approx(-0.075)

    def test_zoom_out_expands_symmetrically(self):
        controller = ViewportController()
        assert controller.zoom_out()
        tl, br = controller.viewport.top_left, controller.viewport.bottom_right
        assert tl.real == pytest.approx(-2.4)
        assert tl.imag == pytest.approx(-1.8)
        assert br.real == pytest.approx(2.4)
        assert br.imag == pytest.approx(1.8)

    def test_zoom_out_overflow_is_refused(self):
        controller = ViewportController(Viewport(complex(-5e307, -5e307), complex(5e307, 5e307)))
        results = [controller.zoom_out() for _ in range(10)]
        assert results[:3] == [True, True, True]
        assert not results[-1]
        assert controller.viewport.is_valid()
        assert controller.at_zoom_limit

    def test_successful_zoom_clears_limit_flag(self):
        controller = ViewportController(Viewport(complex(-5e307, -5e307), complex(5e307, 5e307)))
        while controller.zoom_out():
            pass
        assert controller.at_zoom_limit
        assert controller.zoom_in(400, 300, (800, 600))
        assert not controller.at_zoom_limit


class TestDepth:

    def test_increase_is_unbounded(self):
        controller = ViewportController()
        for _ in range(50):
            assert controller.increase_depth()
        assert controller.max_iter == 5200

    def test_decrease_stops_at_floor(self):
        controller = ViewportController(max_iter=200)
        assert controller.decrease_depth()
        assert controller.max_iter == 100
        assert not controller.decrease_depth()
        assert controller.max_iter == 100

    def test_decrease_from_floor_is_noop(self):
        controller = ViewportController(max_iter=100)
        for _ in range(5):
            assert not controller.decrease_depth()
        assert controller.max_iter == 100

    def test_decrease_from_off_step_depth_keeps_floor(self):
        controller = ViewportController(max_iter=250)
        assert controller.decrease_depth()
        assert controller.max_iter == 150
        assert not controller.decrease_depth()
        assert controller.max_iter == 150
