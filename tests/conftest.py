import os

# Headless pygame: no window, no audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame  # type: ignore
import pytest

from snake.config import Config
from snake.session import Session


class FakeTimer:
    """Records start/stop instead of scheduling pygame timer events."""

    def __init__(self):
        self.active = False
        self.calls = []

    def start(self):
        self.calls.append("start")
        self.active = True

    def stop(self):
        self.calls.append("stop")
        self.active = False


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def session(timer):
    s = Session(Config(seed=7), timer=timer)
    s.start()
    return s
