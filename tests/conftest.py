"""Pytest fixtures shared by the Pilot Lou tests."""
import os

# Headless pygame; must be set before pygame creates a window
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from pilotlou.games import FrameScheduler
from games.Dodge.game_mode import DodgeMode


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture
def pygame_init():
    """Initialize pygame for a test, quit after."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def surface(pygame_init):
    """Off-screen 500x500 drawing surface."""
    return pygame.Surface((500, 500))


@pytest.fixture
def game(surface, clock):
    """Fresh Dodge game on the 500x500 surface with a fake clock."""
    return DodgeMode(surface=surface, scheduler=FrameScheduler(), clock=clock)
