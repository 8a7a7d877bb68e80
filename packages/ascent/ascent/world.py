"""World - the entity collections of a single run."""

from __future__ import annotations

from ascent.config import GameConfig
from ascent.entities import Camera, Collectible, Particle, Platform, Player
from ascent.types import CollectibleKind


class World:
    """Owns the player, platforms, collectibles, particles and camera.

    All collections are mutated synchronously inside a tick; ``reset``
    rebuilds them for a new run.
    """

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.canvas_width = config.canvas.width
        self.canvas_height = config.canvas.height
        self.player = self._spawn_player()
        self.start_y = self.player.y
        self.platforms: list[Platform] = []
        self.collectibles: list[Collectible] = []
        self.particles: list[Particle] = []
        self.camera = Camera(zoom=config.camera.zoom)
        self.direction = 0

    def _spawn_player(self) -> Player:
        pc = self.config.player
        x = self.canvas_width / 2 - pc.width / 2
        y = self.canvas_height - pc.start_offset
        return Player(
            x=x,
            y=y,
            width=pc.width,
            height=pc.height,
            prev_y=y,
            flight_power=pc.base_flight_power,
        )

    def reset(self) -> None:
        self.player = self._spawn_player()
        self.start_y = self.player.y
        self.platforms.clear()
        self.collectibles.clear()
        self.particles.clear()
        self.camera = Camera(zoom=self.config.camera.zoom)
        self.direction = 0

    # -- Queries --

    def highest_platform(self) -> Platform | None:
        if not self.platforms:
            return None
        return min(self.platforms, key=lambda p: p.y)

    def tacos(self) -> list[Collectible]:
        return [c for c in self.collectibles if c.kind is CollectibleKind.TACO]

    def removal_line(self) -> float:
        """Entities below this y have scrolled out for good."""
        return self.camera.y + self.canvas_height + self.config.platform.prune_margin

    def generation_line(self) -> float:
        """Content must exist at least up to this y."""
        return self.camera.y - self.canvas_height - self.config.platform.generate_ahead
