"""Read-only view of a game for renderers and other observers."""
from __future__ import annotations

import copy
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from ascent.entities import Camera, Collectible, Particle, Platform, Player
from ascent.types import GameState
from ascent_powerup import ActivePowerup


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_plain(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class GameSnapshot:
    """Deep copy of everything a frame renderer needs.

    Mutating the copied entities has no effect on the running game.
    """

    state: GameState
    tick_number: int
    elapsed_ms: float
    score: int
    best_score: int
    combo: int
    player: Player
    platforms: tuple[Platform, ...]
    collectibles: tuple[Collectible, ...]
    particles: tuple[Particle, ...]
    camera: Camera
    powerups: tuple[ActivePowerup, ...]
    end_reason: str | None = None

    @classmethod
    def capture(cls, **fields: Any) -> GameSnapshot:
        return cls(**copy.deepcopy(fields))

    def as_dict(self) -> dict[str, Any]:
        """Plain data (enums as their values) for JSON-style consumers."""
        return _plain(asdict(self))
