"""
Main application module for the Mandelbrot viewer.

Contains the MandelbrotApp class which handles:
- Window setup and the poll/dispatch/render loop
- User input (click zoom, iteration depth keys, quit)
- Handing each new state to the renderer and flipping the display
"""

import sys

import pygame

from .compute import warmup_jit
from .renderer import FrameRenderer, ViewerError
from .viewport import ViewportController


class PygameEvents:
    """Event source backed by pygame's event queue and mouse state."""

    def poll(self):
        """Drain and return the pending events."""
        return pygame.event.get()

    def pointer_state(self):
        """Returns (x, y, left_down, right_down)."""
        x, y = pygame.mouse.get_pos()
        buttons = pygame.mouse.get_pressed()
        return x, y, buttons[0], buttons[2]


class MandelbrotApp:
    """
    Main application class for the Mandelbrot viewer.

    Handles the pygame window and event loop, and coordinates between
    the viewport controller, the renderer and the display.

    Zoom trigger modes:
        'held':  mouse buttons are sampled once per poll cycle, so holding
                 a button keeps zooming (one step and one render per cycle,
                 about 30 per second)
        'click': one zoom step per button press event
    """

    # Default configuration
    DEFAULT_WIDTH = 800
    DEFAULT_HEIGHT = 600
    TITLE = "Mandelbrot explorer"
    POLL_INTERVAL_MS = 1000 // 30
    ZOOM_TRIGGERS = ('held', 'click')

    # "+" on the main row is shift + "=" on US layouts
    INCREASE_KEYS = (pygame.K_KP_PLUS, pygame.K_PLUS, pygame.K_EQUALS)
    DECREASE_KEYS = (pygame.K_KP_MINUS, pygame.K_MINUS)

    def __init__(self, width=None, height=None, max_iter=None,
                 delivery='blit', zoom_trigger='held', events=None):
        """
        Initialize the application.

        Args:
            width: Window width in pixels (default 800)
            height: Window height in pixels (default 600)
            max_iter: Starting iteration depth (default 200)
            delivery: Frame delivery strategy, 'blit' or 'points'
            zoom_trigger: 'held' or 'click' (see class docstring)
            events: Event source (default: pygame's queue and mouse)
        """
        if zoom_trigger not in self.ZOOM_TRIGGERS:
            raise ValueError(
                f"Unknown zoom trigger {zoom_trigger!r}, expected one of {self.ZOOM_TRIGGERS}"
            )
        self.width = width or self.DEFAULT_WIDTH
        self.height = height or self.DEFAULT_HEIGHT
        self.zoom_trigger = zoom_trigger

        self.controller = ViewportController(max_iter=max_iter)
        self.renderer = FrameRenderer(delivery)
        self.events = events or PygameEvents()

        # Pygame state (initialized in run())
        self.screen = None

        self.frames_rendered = 0
        self.running = False

    def run(self):
        """Run the application main loop."""
        try:
            self._init_pygame()
            pygame.display.set_caption("Compiling (first run only)...")
            warmup_jit()
            pygame.display.set_caption(self.TITLE)
            self._render()

            self.running = True
            while self.running:
                self.step()
                pygame.time.wait(self.POLL_INTERVAL_MS)
        finally:
            pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((self.width, self.height))
        except pygame.error as e:
            raise ViewerError(f"Could not create window: {e}") from e
        pygame.display.set_caption(self.TITLE)

    def step(self):
        """
        Run one poll cycle: handle pending events, then sample the mouse.

        Each state change renders a full frame before returning.
        """
        for event in self.events.poll():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                self._handle_key(event)
            elif event.type == pygame.MOUSEBUTTONDOWN and self.zoom_trigger == 'click':
                self._handle_click(event)

        if self.zoom_trigger == 'held':
            self._handle_pointer()

    def _handle_key(self, event):
        """Handle keyboard input."""
        if event.key in self.INCREASE_KEYS:
            self.controller.increase_depth()
            print(f"Increasing iterations count to {self.controller.max_iter}")
            self._render()
        elif event.key in self.DECREASE_KEYS:
            if self.controller.decrease_depth():
                print(f"Decreasing iterations count to {self.controller.max_iter}")
                self._render()

    def _handle_click(self, event):
        """Handle a mouse button press (click trigger mode)."""
        if event.button == 1:
            x, y = event.pos
            if self.controller.zoom_in(x, y, self.screen.get_size()):
                self._render()
        elif event.button == 3:
            if self.controller.zoom_out():
                self._render()

    def _handle_pointer(self):
        """
        Sample mouse buttons (held trigger mode). Left wins over right.

        Every cycle with a button down renders, even when the zoom was
        refused at the precision limit.
        """
        x, y, left, right = self.events.pointer_state()
        if left:
            self.controller.zoom_in(x, y, self.screen.get_size())
        elif right:
            self.controller.zoom_out()
        else:
            return
        self._render()

    def _render(self):
        """Render the current state and present it."""
        self.renderer.render(
            self.screen, self.controller.viewport, self.controller.max_iter
        )
        pygame.display.flip()
        self.frames_rendered += 1


def run(width=None, height=None, max_iter=None, delivery='blit', zoom_trigger='held'):
    """
    Run the Mandelbrot viewer.

    Args:
        width: Window width (default 800)
        height: Window height (default 600)
        max_iter: Starting iteration depth (default 200)
        delivery: 'blit' or 'points'
        zoom_trigger: 'held' or 'click'
    """
    app = MandelbrotApp(width, height, max_iter, delivery, zoom_trigger)
    app.run()


def main():
    """Console entry point. Returns the process exit status."""
    try:
        run()
    except ViewerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0
