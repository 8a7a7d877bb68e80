"""Fall-death rule with a lenient buffer near the start."""
from __future__ import annotations

from ascent.config import DeathConfig


def death_buffer(distance_from_start: float, config: DeathConfig | None = None) -> float:
    """Extra room below the view before a fall is fatal."""
    config = config if config is not None else DeathConfig()
    for limit, buffer in config.zones:
        if distance_from_start < limit:
            return buffer
    return config.default_buffer


def is_fatal_fall(
    player_y: float,
    camera_y: float,
    canvas_height: float,
    start_y: float,
    config: DeathConfig | None = None,
) -> bool:
    buffer = death_buffer(abs(player_y - start_y), config)
    return player_y > camera_y + canvas_height + buffer
