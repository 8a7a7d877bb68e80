"""Core data types for timed power-ups."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ascent.types import PowerupKind


class PowerupPhase(Enum):
    ACTIVATING = "activating"
    ACTIVE = "active"
    WARNING = "warning"  # about to run out
    EXPIRED = "expired"


@dataclass
class ActivePowerup:
    """Runtime state of one active power-up. Mutable."""

    kind: PowerupKind
    time_left_ms: float
    duration_ms: float
    phase: PowerupPhase = PowerupPhase.ACTIVATING
    warning_fired: bool = False


@dataclass(frozen=True)
class PowerupTransition:
    """A phase change reported by ``PowerupManager``."""

    kind: PowerupKind
    phase: PowerupPhase
    reason: str | None = None  # "timeout" or "evicted" for EXPIRED
    time_left_ms: float = 0.0
