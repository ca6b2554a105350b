import os

# Headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame
import pytest


class FakeEvents:
    """Scripted event source: one batch of events per poll, fixed pointer."""

    def __init__(self, batches=None, pointer=(0, 0, False, False)):
        self.batches = list(batches or [])
        self.pointer = pointer

    def poll(self):
        return self.batches.pop(0) if self.batches else []

    def pointer_state(self):
        return self.pointer


def read_pixels(surface):
    """(height, width, 3) array of the surface's RGB values."""
    width, height = surface.get_size()
    return np.array(
        [[tuple(surface.get_at((x, y)))[:3] for x in range(width)]
         for y in range(height)],
        dtype=np.uint8,
    )


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode((8, 6))
    yield surface
    pygame.display.quit()
