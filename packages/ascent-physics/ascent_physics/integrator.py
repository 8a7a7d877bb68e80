"""Per-frame player and platform integration, scaled by elapsed frames."""
from __future__ import annotations

from ascent.config import PlayerConfig
from ascent.entities import Platform, Player
from ascent.types import PlatformKind

from ascent_physics.vec import lerp


class PlayerPhysics:
    """Integrates the player body.

    Constants in ``PlayerConfig`` are per reference frame; every call takes
    ``frames`` (elapsed time in reference frames) and scales by it, so a
    60 Hz and a 30 Hz host see the same trajectory.
    """

    def __init__(self, config: PlayerConfig) -> None:
        self._config = config

    @property
    def config(self) -> PlayerConfig:
        return self._config

    def step(self, player: Player, direction: int, frames: float, canvas_width: float) -> None:
        if frames <= 0:
            return
        cfg = self._config

        if direction:
            player.vx += direction * cfg.move_acceleration * frames
            player.vx = max(-cfg.max_speed, min(cfg.max_speed, player.vx))

        if player.is_flying:
            player.vy += cfg.gravity * cfg.flight_gravity_scale * frames
            player.vy -= player.flight_power * cfg.flight_lift * frames
            player.vy = max(player.vy, -cfg.max_flight_speed)
        else:
            player.vy += cfg.gravity * frames

        player.vx *= cfg.friction ** frames
        player.vy = min(player.vy, cfg.terminal_velocity)
        limit = cfg.max_horizontal_velocity
        player.vx = max(-limit, min(limit, player.vx))

        player.prev_y = player.y
        player.x += player.vx * frames
        player.y += player.vy * frames

        if cfg.wrap_edges:
            wrap_horizontal(player, canvas_width)

        target = player.vx * cfg.rotation_factor
        player.rotation = lerp(player.rotation, target, min(1.0, cfg.rotation_smoothing * frames))


def wrap_horizontal(player: Player, canvas_width: float) -> None:
    """Leaving one side re-enters from the other."""
    if player.x + player.width < 0:
        player.x = canvas_width
    elif player.x > canvas_width:
        player.x = -player.width


def step_platform(platform: Platform, frames: float, canvas_width: float) -> None:
    """Advance a moving platform; it bounces off the canvas edges."""
    if platform.kind is not PlatformKind.MOVING or frames <= 0:
        return
    platform.x += platform.vx * frames
    right = canvas_width - platform.width
    if platform.x <= 0 or platform.x >= right:
        platform.vx = -platform.vx
        platform.x = max(0.0, min(right, platform.x))
