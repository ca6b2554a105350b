"""
Viewport state and the controller that pans/zooms it.

The viewport is the rectangle of the complex plane shown in the window,
stored as its top-left and bottom-right corners. ViewportController owns
the viewport and the iteration depth and applies one transition per
input action.
"""

import cmath

from .compute import map_pixel


class Viewport:
    """Rectangle of the complex plane between two corner points."""

    def __init__(self, top_left, bottom_right):
        self.top_left = complex(top_left)
        self.bottom_right = complex(bottom_right)

    @property
    def span(self):
        """Per-axis extent, bottom_right - top_left."""
        return self.bottom_right - self.top_left

    def is_valid(self):
        """Both spans must be non-zero and finite."""
        d = self.span
        return cmath.isfinite(d) and d.real != 0 and d.imag != 0

    def __eq__(self, other):
        if not isinstance(other, Viewport):
            return NotImplemented
        return (self.top_left == other.top_left
                and self.bottom_right == other.bottom_right)

    def __repr__(self):
        return f"Viewport({self.top_left!r}, {self.bottom_right!r})"


def pixel_to_complex(x, y, window_size, viewport):
    """
    Map a pixel to the complex plane for the given viewport.

    Uses the same kernel as the frame computation, so a click lands on
    exactly the point that was rendered under it.
    """
    width, height = window_size
    tl, br = viewport.top_left, viewport.bottom_right
    re, im = map_pixel(x, y, width, height, tl.real, tl.imag, br.real, br.imag)
    return complex(re, im)


class ViewportController:
    """
    Owns the current viewport and iteration depth.

    Every transition returns True if it changed the state (and a new
    frame is therefore due), False if it was refused.
    """

    DEFAULT_VIEWPORT = (complex(-2.0, -1.5), complex(2.0, 1.5))
    DEFAULT_MAX_ITER = 200
    DEPTH_STEP = 100
    MIN_DEPTH = 100
    ZOOM_STEP = 0.1  # Fraction of the span removed/added per axis

    def __init__(self, viewport=None, max_iter=None):
        """
        Args:
            viewport: Starting Viewport (default: the whole set)
            max_iter: Starting iteration depth (default 200)
        """
        self.viewport = viewport or Viewport(*self.DEFAULT_VIEWPORT)
        if not self.viewport.is_valid():
            raise ValueError(f"Degenerate viewport: {self.viewport!r}")
        self.max_iter = self.DEFAULT_MAX_ITER if max_iter is None else max_iter
        if self.max_iter < 1:
            raise ValueError(f"Iteration depth must be positive, got {self.max_iter}")
        self.at_zoom_limit = False

    def zoom_in(self, x, y, window_size):
        """
        Shrink the viewport by ZOOM_STEP per axis, biased toward pixel (x, y).

        The clicked point drifts toward the centre rather than jumping
        there; several steps are needed to converge on it.
        """
        tl, br = self.viewport.top_left, self.viewport.bottom_right
        d = self.viewport.span
        click = pixel_to_complex(x, y, window_size, self.viewport)
        rel_re = (click.real - tl.real) / d.real
        rel_im = (click.imag - tl.imag) / d.imag
        step = self.ZOOM_STEP
        return self._set_viewport(Viewport(
            complex(tl.real + d.real * step * rel_re,
                    tl.imag + d.imag * step * rel_im),
            complex(br.real - d.real * step * (1.0 - rel_re),
                    br.imag - d.imag * step * (1.0 - rel_im)),
        ))

    def zoom_out(self):
        """Grow the viewport by ZOOM_STEP per axis on every side."""
        tl, br = self.viewport.top_left, self.viewport.bottom_right
        d = self.viewport.span
        step = self.ZOOM_STEP
        return self._set_viewport(Viewport(
            complex(tl.real - d.real * step, tl.imag - d.imag * step),
            complex(br.real + d.real * step, br.imag + d.imag * step),
        ))

    def increase_depth(self):
        self.max_iter += self.DEPTH_STEP
        return True

    def decrease_depth(self):
        """Lower the depth by one step unless that would go under MIN_DEPTH."""
        if self.max_iter - self.DEPTH_STEP < self.MIN_DEPTH:
            return False
        self.max_iter -= self.DEPTH_STEP
        return True

    def _set_viewport(self, viewport):
        # Past the limits of float precision the span collapses to 0 (or
        # overflows); keep the last usable view instead.
        if not viewport.is_valid():
            if not self.at_zoom_limit:
                print(f"Zoom limit reached, keeping {self.viewport!r}")
            self.at_zoom_limit = True
            return False
        self.at_zoom_limit = False
        self.viewport = viewport
        return True
