"""
Mandelbrot Set Viewer Package

An interactive Mandelbrot set viewer using Pygame for display and
Numba for parallel JIT-compiled computation.

Quick Start:
    from mandelview import run
    run()

Or from command line:
    python -m mandelview

Package Structure:
    - compute.py: JIT-compiled mapping, escape-time and colouring kernels
    - colormaps.py: Per-pixel colour policy
    - viewport.py: Viewport rectangle and zoom/depth controller
    - renderer.py: Frame renderer with blit and per-pixel delivery
    - app.py: Main application and event loop

Controls:
    - Left click (hold to keep going): Zoom in toward the pointer
    - Right click (hold to keep going): Zoom out
    - + / -: Raise / lower iteration depth by 100
    - ESC: Quit
"""

from .app import run, main, MandelbrotApp
from .renderer import FrameRenderer, ViewerError
from .viewport import Viewport, ViewportController, pixel_to_complex
from .colormaps import paint
from .compute import escape

__version__ = "1.0.0"
__all__ = [
    "run",
    "main",
    "MandelbrotApp",
    "FrameRenderer",
    "ViewerError",
    "Viewport",
    "ViewportController",
    "pixel_to_complex",
    "paint",
    "escape",
]
