"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains the performance-critical per-frame functions.
They are JIT-compiled for speed and handle:
- Mapping pixel coordinates onto the complex plane
- Escape-time iteration of z² + c (single point and full frame)
- Gradient colouring of a whole frame

Inside the kernels a point that never escapes is marked with
NOT_ESCAPED (-1); the Python-facing helpers translate that to None.
"""

import numpy as np
from numba import jit, prange


NOT_ESCAPED = -1
ESCAPE_RADIUS_SQ = 4.0  # |z|² bound, i.e. escape radius 2


@jit(nopython=True, cache=True)
def map_pixel(x, y, width, height, tl_re, tl_im, br_re, br_im):
    """
    Map a pixel to its point in the complex plane.

    Args:
        x, y: Pixel coordinates
        width, height: Window size in pixels (non-zero)
        tl_re, tl_im: Top-left corner of the viewport
        br_re, br_im: Bottom-right corner of the viewport

    Returns:
        (re, im): The complex point, as two floats
    """
    rel_x = x / width
    rel_y = y / height
    return tl_re + rel_x * (br_re - tl_re), tl_im + rel_y * (br_im - tl_im)


@jit(nopython=True, cache=True)
def escape_time(cr, ci, max_iter):
    """
    Iterate z² + c from z = 0 and report when the orbit leaves radius 2.

    Returns the 0-based step at which |z|² first exceeded 4,
    or NOT_ESCAPED if it stayed bounded for max_iter steps.
    """
    zr = 0.0
    zi = 0.0
    for i in range(max_iter):
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQ:
            return i
    return NOT_ESCAPED


@jit(nopython=True, parallel=True, cache=True)
def compute_escape_counts(coords, width, height, tl_re, tl_im, br_re, br_im, max_iter):
    """
    Compute the escape result of every pixel in a frame.

    Pixels are independent, so the index range is split across threads
    with prange. Each thread only writes the slots it owns.

    Args:
        coords: (N, 2) int array of (y, x) pixel coordinates
        width, height: Window size in pixels
        tl_re, tl_im, br_re, br_im: Viewport corners
        max_iter: Iteration depth

    Returns:
        (N,) int32 array; entry k belongs to coords[k]
    """
    n = coords.shape[0]
    counts = np.empty(n, dtype=np.int32)
    for k in prange(n):
        re, im = map_pixel(coords[k, 1], coords[k, 0], width, height,
                           tl_re, tl_im, br_re, br_im)
        counts[k] = escape_time(re, im, max_iter)
    return counts


@jit(nopython=True, parallel=True, cache=True)
def apply_gradient(counts, max_iter, out):
    """
    Colour escape results with the green-white gradient.

    Escaped after i steps -> c = floor(255 * i / max_iter), colour (c/2, c, c).
    Never escaped -> black.

    Args:
        counts: (N,) array from compute_escape_counts
        max_iter: Iteration depth used for the counts
        out: (N, 3) uint8 array (modified in place)
    """
    n = counts.shape[0]
    for k in prange(n):
        i = counts[k]
        if i < 0:
            out[k, 0] = 0
            out[k, 1] = 0
            out[k, 2] = 0
        else:
            c = min(255 * i // max_iter, 255)
            out[k, 0] = c // 2
            out[k, 1] = c
            out[k, 2] = c


def pixel_coordinates(width, height):
    """Row-major (y, x) pairs covering a width x height window."""
    ys, xs = np.indices((height, width))
    return np.ascontiguousarray(
        np.column_stack((ys.ravel(), xs.ravel())), dtype=np.int64
    )


def escape(c, max_iter):
    """
    Escape step of a single point, or None if it stays bounded.

    >>> escape(3, 10)
    0
    >>> escape(0, 10) is None
    True
    """
    c = complex(c)
    i = escape_time(c.real, c.imag, max_iter)
    return None if i == NOT_ESCAPED else int(i)


def iter_escape_results(coords, counts):
    """Stream (y, x, result) triples, with None for points inside the set."""
    for (y, x), i in zip(coords, counts):
        yield int(y), int(x), None if i == NOT_ESCAPED else int(i)


def warmup_jit():
    """
    Warm up JIT compilation with a tiny frame.

    Call this once at startup so the first real render is not
    delayed by compilation.
    """
    coords = pixel_coordinates(4, 4)
    counts = compute_escape_counts(coords, 4, 4, -2.0, -1.5, 2.0, 1.5, 10)
    apply_gradient(counts, 10, np.empty((counts.shape[0], 3), dtype=np.uint8))
    escape_time(0.0, 0.0, 1)
