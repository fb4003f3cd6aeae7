"""Drawing surface used by the star field, with a pygame implementation."""

from __future__ import annotations

import math
from typing import Protocol

import pygame


class Canvas(Protocol):
    """The three primitives a StarField draws with."""

    def fill_background(self, color: pygame.Color) -> None: ...

    def draw_filled_circle(self, x: float, y: float, radius: float, color: pygame.Color) -> None: ...

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: pygame.Color,
        stroke_width: int,
        alpha: int,
    ) -> None: ...


class SurfaceCanvas:
    """Canvas backed by a pygame surface.

    Each relation line is drawn on its own small SRCALPHA layer and blitted
    straight away, so alpha is honored and a line covers the stars drawn
    before it while stars drawn after it cover the line.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def fill_background(self, color: pygame.Color) -> None:
        self.surface.fill(color)

    def draw_filled_circle(self, x: float, y: float, radius: float, color: pygame.Color) -> None:
        pygame.draw.circle(self.surface, color, (x, y), radius)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: pygame.Color,
        stroke_width: int,
        alpha: int,
    ) -> None:
        width = int(stroke_width)
        if width <= 0 or alpha <= 0:
            return

        # Layer covers the line's bounding box plus the stroke on every side
        left = math.floor(min(x1, x2)) - width
        top = math.floor(min(y1, y2)) - width
        right = math.ceil(max(x1, x2)) + width
        bottom = math.ceil(max(y1, y2)) + width
        layer = pygame.Surface((right - left + 1, bottom - top + 1), pygame.SRCALPHA)

        line_color = pygame.Color(color)
        line_color.a = min(255, int(alpha))
        pygame.draw.line(layer, line_color, (x1 - left, y1 - top), (x2 - left, y2 - top), width)
        self.surface.blit(layer, (left, top))
