"""Entity dataclasses owned and mutated by the simulation."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ascent.types import CollectibleKind, PlatformKind, PowerupKind


@dataclass
class Player:
    x: float
    y: float
    width: float
    height: float
    vx: float = 0.0
    vy: float = 0.0
    rotation: float = 0.0
    prev_y: float = 0.0
    grounded: bool = False
    is_flying: bool = False
    has_shield: bool = False
    has_magnet: bool = False
    flight_power: float = 0.15
    flight_time_left: float = 0.0

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Platform:
    x: float
    y: float
    width: float
    height: float
    kind: PlatformKind = PlatformKind.NORMAL
    touched: bool = False
    broken: bool = False
    vx: float = 0.0


@dataclass
class Collectible:
    x: float
    y: float
    width: float
    height: float
    kind: CollectibleKind = CollectibleKind.TACO
    powerup: PowerupKind | None = None
    collected: bool = False
    pulse_phase: float = 0.0
    bob_phase: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    kind: str
    life: float
    max_life: float
    alpha: float = 1.0


@dataclass
class Camera:
    y: float = 0.0
    target_y: float = 0.0
    max_y: float = 0.0  # highest (smallest) y reached so far
    zoom: float = 1.0


def is_well_formed(entity: Platform | Collectible) -> bool:
    """Reject entities a single bad spawn could have corrupted."""
    if not all(math.isfinite(v) for v in (entity.x, entity.y, entity.width, entity.height)):
        return False
    if entity.width <= 0 or entity.height <= 0:
        return False
    if isinstance(entity, Collectible):
        if entity.kind is CollectibleKind.POWERUP and not isinstance(entity.powerup, PowerupKind):
            return False
    return True
