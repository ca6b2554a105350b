"""
Synchronous frame renderer.

The FrameRenderer class handles one full frame per call:
- Generating the pixel coordinates for the current window size
- Parallel escape-time computation (numba prange)
- Colouring and delivering the frame to a pygame surface
- Printing compute/render timings

Two delivery strategies paint the same image:
- 'blit': colour the whole frame into one RGB buffer and blit it once
- 'points': stream (y, x, result) triples and plot each pixel
"""

import time

import numpy as np
import pygame

from .colormaps import paint
from .compute import (
    apply_gradient,
    compute_escape_counts,
    iter_escape_results,
    pixel_coordinates,
)


class ViewerError(RuntimeError):
    """Unrecoverable window or render failure."""


class FrameRenderer:
    """
    Renders Mandelbrot frames onto a pygame surface.

    Usage:
        renderer = FrameRenderer('blit')
        renderer.render(screen, viewport, max_iter)
        pygame.display.flip()

    Attributes:
        delivery: Name of the delivery strategy
        frame: Last RGB frame buffer (height, width, 3), 'blit' only
    """

    DELIVERIES = ('blit', 'points')

    def __init__(self, delivery='blit'):
        if delivery not in self.DELIVERIES:
            raise ValueError(
                f"Unknown delivery {delivery!r}, expected one of {self.DELIVERIES}"
            )
        self.delivery = delivery
        self.frame = None

    def compute(self, window_size, viewport, max_iter):
        """
        Escape results for every pixel of the window.

        Returns:
            (coords, counts): (N, 2) (y, x) coordinates and the
            matching (N,) escape counts (-1 = not escaped)
        """
        width, height = window_size
        coords = pixel_coordinates(width, height)
        tl, br = viewport.top_left, viewport.bottom_right
        counts = compute_escape_counts(
            coords, width, height,
            tl.real, tl.imag, br.real, br.imag,
            max_iter
        )
        return coords, counts

    def render(self, surface, viewport, max_iter):
        """
        Compute, colour and draw a full frame onto surface.

        The caller is responsible for flipping the display.

        Returns:
            (compute_seconds, render_seconds)

        Raises:
            ViewerError: if pygame fails to build or draw the frame
        """
        window_size = surface.get_size()

        stamp = time.perf_counter()
        coords, counts = self.compute(window_size, viewport, max_iter)
        compute_seconds = time.perf_counter() - stamp
        print(f"Computation time {compute_seconds * 1000:.2f}ms")

        stamp = time.perf_counter()
        try:
            if self.delivery == 'blit':
                self._blit(surface, window_size, counts, max_iter)
            else:
                self._plot(surface, coords, counts, max_iter)
        except pygame.error as e:
            raise ViewerError(f"Could not render frame: {e}") from e
        render_seconds = time.perf_counter() - stamp
        print(f"Rendering time {render_seconds * 1000:.2f}ms")

        return compute_seconds, render_seconds

    def _blit(self, surface, window_size, counts, max_iter):
        """Colour the whole frame into one buffer and blit it in one call."""
        width, height = window_size
        rgb = np.empty((counts.shape[0], 3), dtype=np.uint8)
        apply_gradient(counts, max_iter, rgb)
        self.frame = rgb.reshape(height, width, 3)

        # surfarray is indexed [x, y]
        frame_surface = pygame.surfarray.make_surface(self.frame.swapaxes(0, 1))
        surface.blit(frame_surface, (0, 0))

    def _plot(self, surface, coords, counts, max_iter):
        """Plot pixel by pixel. Much slower than a blit, same image."""
        self.frame = None
        for y, x, result in iter_escape_results(coords, counts):
            surface.set_at((x, y), paint(result, max_iter))
