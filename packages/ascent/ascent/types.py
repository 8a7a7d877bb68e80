"""Shared type aliases, enums and the per-frame context for the ascent core."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable


class GameState(Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


class PlatformKind(Enum):
    NORMAL = "normal"
    SPRING = "spring"
    SUPERSPRING = "superspring"
    MINISPRING = "minispring"
    MOVING = "moving"
    BREAKING = "breaking"
    CLOUD = "cloud"
    EVIL = "evil"


class CollectibleKind(Enum):
    TACO = "taco"
    POWERUP = "powerup"


class PowerupKind(Enum):
    CORN = "corn"
    SHIELD = "shield"
    MAGNET = "magnet"


@dataclass(frozen=True, slots=True)
class FrameContext:
    """Everything a system needs to know about the tick being executed.

    ``dt_ms`` is the clamped wall-clock delta. ``frames`` is the same delta
    expressed in reference frames, which is what the per-frame physics
    constants are tuned against.
    """

    tick_number: int
    dt_ms: float
    frames: float
    elapsed_ms: float
    request_game_over: Callable[[str], None]
    random: _random.Random


if TYPE_CHECKING:
    from ascent.world import World

System = Callable[["World", FrameContext], None]
Hook = Callable[["World", FrameContext], None]
