"""Zodiac View — standalone window hosting a star field."""

from __future__ import annotations

import logging

import pygame

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, TITLE
from .models.config import ZodiacConfig
from .models.starfield import StarField
from .ui.canvas import SurfaceCanvas

logger = logging.getLogger(__name__)


class ZodiacApp:
    """Host loop: owns the window and ticks the star field once per frame."""

    def __init__(
        self,
        config: ZodiacConfig | None = None,
        size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
        fps: int = FPS,
    ) -> None:
        pygame.init()
        self.config = config or ZodiacConfig()
        self.fps = fps
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.canvas = SurfaceCanvas(self.screen)
        self.field = StarField(self.config)
        self.field.on_surface_size(*self.screen.get_size())

        self._mouse_down = False

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        logger.info(
            "Starting %dx%d, %d stars, interaction %s",
            self.field.width,
            self.field.height,
            self.config.star_count,
            "on" if self.config.interaction_enabled else "off",
        )
        while self.running:
            self.clock.tick(self.fps)
            self._handle_events()
            self._draw()

        logger.info("Stopped")
        pygame.quit()

    def _draw(self) -> None:
        self.field.tick(self.canvas)
        pygame.display.flip()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self._resize(event.w, event.h)
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            self._handle_finger(event)
        elif getattr(event, "touch", False):
            return  # Mouse events synthesized from touch, already handled
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse_down = True
            self.field.on_pointer_press(*event.pos)
        elif event.type == pygame.MOUSEMOTION and self._mouse_down:
            self.field.on_pointer_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._mouse_down = False
            self.field.on_pointer_release()

    def _handle_finger(self, event: pygame.event.Event) -> None:
        # Finger coordinates are normalized to 0–1
        x = event.x * self.field.width
        y = event.y * self.field.height
        if event.type == pygame.FINGERDOWN:
            self.field.on_pointer_press(x, y)
        elif event.type == pygame.FINGERMOTION:
            self.field.on_pointer_move(x, y)
        else:
            self.field.on_pointer_release()

    def _resize(self, width: int, height: int) -> None:
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.canvas.surface = self.screen
        self.field.on_surface_size(width, height)
