"""Shared pytest fixtures for zodiacview tests."""

from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from zodiacview.models.config import ZodiacConfig
from zodiacview.models.starfield import StarField


class RecordingCanvas:
    """Canvas fake that keeps every draw call."""

    def __init__(self) -> None:
        self.backgrounds: list[pygame.Color] = []
        self.circles: list[tuple[float, float, float, pygame.Color]] = []
        self.lines: list[dict] = []

    def fill_background(self, color: pygame.Color) -> None:
        self.backgrounds.append(color)

    def draw_filled_circle(self, x: float, y: float, radius: float, color: pygame.Color) -> None:
        self.circles.append((x, y, radius, color))

    def draw_line(self, x1, y1, x2, y2, color, stroke_width, alpha) -> None:
        self.lines.append(
            {
                "start": (x1, y1),
                "end": (x2, y2),
                "color": color,
                "width": stroke_width,
                "alpha": alpha,
            }
        )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so star layouts are reproducible."""
    return random.Random(1234)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def config() -> ZodiacConfig:
    return ZodiacConfig()


@pytest.fixture
def interactive_config() -> ZodiacConfig:
    return ZodiacConfig(interaction_enabled=True)


@pytest.fixture
def field(interactive_config: ZodiacConfig, rng: random.Random) -> StarField:
    """Interactive 400x300 field with the default star count."""
    f = StarField(interactive_config, rng)
    f.on_surface_size(400, 300)
    return f


@pytest.fixture
def still_field(rng: random.Random) -> StarField:
    """Motionless 1000x1000 field with no generated stars."""
    f = StarField(ZodiacConfig(star_count=0, speed=0, distance=200), rng)
    f.on_surface_size(1000, 1000)
    return f
