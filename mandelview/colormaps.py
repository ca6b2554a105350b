"""
Colour policy for Mandelbrot visualization.

Points that escape get a green-white gradient that brightens with the
escape step; points inside the set are black. paint() is the per-pixel
form of the same mapping that compute.apply_gradient applies to a
whole frame, and the two must agree byte for byte.
"""


INSIDE_COLOUR = (0, 0, 0)


def gradient_value(iteration, max_iter):
    """Gradient level for an escape step: floor(255 * i / max_iter) as a byte."""
    return min(255 * iteration // max_iter, 255)


def paint(result, max_iter):
    """
    Colour for one escape result.

    Args:
        result: Escape step, or None if the point never escaped
        max_iter: Iteration depth the result was computed with

    Returns:
        (r, g, b) tuple of ints in 0..255
    """
    if result is None:
        return INSIDE_COLOUR
    c = gradient_value(result, max_iter)
    return (c // 2, c, c)
