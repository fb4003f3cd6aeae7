"""Constellation star field: generation, motion, connections and pointer.

The field never schedules itself. The host calls ``tick()`` once per frame
and forwards surface size changes and pointer events.
"""

from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING

from ..constants import MAX_ALPHA, OPACITY_FACTOR
from .config import ZodiacConfig
from .star import Star

if TYPE_CHECKING:
    from ..ui.canvas import Canvas

logger = logging.getLogger(__name__)


def connection_opacity(distance: float, threshold: float) -> int:
    """Line alpha for two stars ``distance`` apart.

    Opaque at zero distance, fading to nothing at 1.4 × threshold.
    """
    opacity = round((OPACITY_FACTOR - distance / threshold) * MAX_ALPHA)
    return max(0, min(MAX_ALPHA, opacity))


class StarField:
    """Owns the stars of one drawing surface."""

    def __init__(self, config: ZodiacConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or ZodiacConfig()
        self.rng = rng or random.Random()
        self.width = 0
        self.height = 0
        self.stars: list[Star] = []
        self.finger: Star | None = None  # Star held by the pointer

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def on_surface_size(self, width: int, height: int) -> None:
        """Adopt new bounds and regenerate every star."""
        if width < 0 or height < 0:
            raise ValueError(f"Surface size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.create_stars()
        logger.debug("Surface resized to %dx%d, %d stars generated", width, height, len(self.stars))

    def create_star(self) -> Star:
        rng = self.rng
        size_min = self.config.star_size_min
        size_max = self.config.star_size_max
        return Star(
            x=rng.random() * self.width,
            y=rng.random() * self.height,
            dir_x=rng.random() - 0.5,
            dir_y=rng.random() - 0.5,
            size=rng.random() * (size_max - size_min) + size_min,
        )

    def create_stars(self, count: int | None = None) -> None:
        """Replace the whole collection, dropping any finger star."""
        if count is None:
            count = self.config.star_count
        self.finger = None
        self.stars = [self.create_star() for _ in range(count)]

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------

    def move_star(self, star: Star) -> Star:
        """Advance a star and bounce it off at most one edge."""
        speed = self.config.speed
        star.x += star.dir_x * speed
        star.y += star.dir_y * speed

        # Only one axis is corrected per tick, checked in this order
        if star.y + star.size > self.height:
            star.dir_y = self.rng.random() * -1
        elif star.y - star.size < 0:
            star.dir_y = self.rng.random()
        elif star.x + star.size > self.width:
            star.dir_x = self.rng.random() * -1
        elif star.x - star.size < 0:
            star.dir_x = self.rng.random()

        return star

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def tick(self, canvas: Canvas) -> int:
        """Move, draw and connect every star once. Returns lines drawn."""
        config = self.config
        canvas.fill_background(config.color_background)

        stars = self.stars
        for star in stars:
            star.clear_connections()

        drawn = 0
        threshold = config.distance
        for star in stars:
            if star is not self.finger:
                self.move_star(star)

            canvas.draw_filled_circle(star.x, star.y, star.size, config.color_star)

            for ref in stars:
                if star is ref or ref.is_connected_to(star):
                    continue
                if abs(star.x - ref.x) < threshold and abs(star.y - ref.y) < threshold:
                    star.connect(ref)
                    self._draw_relation(canvas, star, ref)
                    drawn += 1

        return drawn

    on_render_tick = tick

    def _draw_relation(self, canvas: Canvas, star: Star, ref: Star) -> None:
        dist = math.dist(star.pos, ref.pos)
        canvas.draw_line(
            *star.pos,
            *ref.pos,
            self.config.color_relation,
            self.config.relation_size,
            connection_opacity(dist, self.config.distance),
        )

    def connections(self) -> list[tuple[Star, Star]]:
        """Pairs recorded during the last tick."""
        return [(star, ref) for star in self.stars for ref in star.connections]

    # ------------------------------------------------------------------
    # Pointer
    # ------------------------------------------------------------------

    def on_pointer_press(self, x: float, y: float) -> None:
        """Drop a new star under the pointer.

        A second press replaces the star held by the first.
        """
        if not self.config.interaction_enabled:
            return
        if self.finger is not None:
            self._remove_finger()

        finger = self.create_star()
        finger.x = x
        finger.y = y
        self.stars.append(finger)
        self.finger = finger
        logger.debug("Finger star pressed at (%.1f, %.1f)", x, y)

    def on_pointer_move(self, x: float, y: float) -> None:
        if not self.config.interaction_enabled or self.finger is None:
            return
        self.finger.x = x
        self.finger.y = y

    def on_pointer_release(self) -> None:
        if not self.config.interaction_enabled or self.finger is None:
            return
        self._remove_finger()
        logger.debug("Finger star released")

    def _remove_finger(self) -> None:
        if self.finger in self.stars:
            self.stars.remove(self.finger)
        self.finger = None
