"""Star entity for the constellation field."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Star:
    """A single drifting point.

    Stars compare by identity: two stars sharing coordinates are still
    different stars, and each can sit in another's connection set.
    """

    x: float
    y: float
    dir_x: float  # Unnormalized, scaled by the field's speed
    dir_y: float
    size: float  # Circle radius
    connections: set[Star] = field(default_factory=set, repr=False)

    def connect(self, other: Star) -> None:
        self.connections.add(other)

    def is_connected_to(self, other: Star) -> bool:
        return other in self.connections

    def clear_connections(self) -> None:
        self.connections.clear()

    @property
    def pos(self) -> tuple[float, float]:
        return (self.x, self.y)
