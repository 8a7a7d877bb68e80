"""Timed, capacity-bounded power-ups."""
from ascent_powerup.effects import apply_magnet
from ascent_powerup.manager import PowerupManager
from ascent_powerup.systems import make_powerup_reset, make_powerup_system
from ascent_powerup.types import ActivePowerup, PowerupPhase, PowerupTransition

__all__ = [
    "ActivePowerup",
    "PowerupManager",
    "PowerupPhase",
    "PowerupTransition",
    "apply_magnet",
    "make_powerup_reset",
    "make_powerup_system",
]
