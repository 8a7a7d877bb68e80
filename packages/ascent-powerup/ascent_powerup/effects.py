"""Immediate and continuous power-up effects on the player."""
from __future__ import annotations

from typing import Callable, Iterable

from ascent.config import PowerupDef
from ascent.entities import Collectible, Player
from ascent.types import CollectibleKind, PowerupKind

from ascent_physics import vec


def _apply_corn(player: Player, defn: PowerupDef) -> None:
    player.is_flying = True
    player.flight_power = defn.flight_power
    player.flight_time_left = defn.duration_ms


def _revert_corn(player: Player, base_flight_power: float) -> None:
    player.is_flying = False
    player.flight_time_left = 0.0
    player.flight_power = base_flight_power


def _apply_shield(player: Player, defn: PowerupDef) -> None:
    player.has_shield = True


def _revert_shield(player: Player, base_flight_power: float) -> None:
    player.has_shield = False


def _apply_magnet(player: Player, defn: PowerupDef) -> None:
    player.has_magnet = True


def _revert_magnet(player: Player, base_flight_power: float) -> None:
    player.has_magnet = False


APPLY: dict[PowerupKind, Callable[[Player, PowerupDef], None]] = {
    PowerupKind.CORN: _apply_corn,
    PowerupKind.SHIELD: _apply_shield,
    PowerupKind.MAGNET: _apply_magnet,
}

REVERT: dict[PowerupKind, Callable[[Player, float], None]] = {
    PowerupKind.CORN: _revert_corn,
    PowerupKind.SHIELD: _revert_shield,
    PowerupKind.MAGNET: _revert_magnet,
}


def apply_magnet(
    player: Player,
    collectibles: Iterable[Collectible],
    frames: float,
    magnet_range: float,
    pull: float,
) -> int:
    """Pull uncollected tacos inside ``magnet_range`` toward the player.

    The pull fades linearly to zero at the edge of the range. Returns the
    number of tacos moved.
    """
    if frames <= 0:
        return 0
    center = player.center
    moved = 0
    for item in collectibles:
        if item.collected or item.kind is not CollectibleKind.TACO:
            continue
        offset = vec.sub(center, item.center)
        d = vec.magnitude(offset)
        if d <= 0 or d >= magnet_range:
            continue
        step = pull * (magnet_range - d) / magnet_range * frames
        dx, dy = vec.scale(vec.normalize(offset), step)
        item.x += dx
        item.y += dy
        moved += 1
    return moved
