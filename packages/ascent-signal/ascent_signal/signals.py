"""The closed set of audio/telemetry signal names emitted by the core."""
from __future__ import annotations

from enum import Enum


class Signal(Enum):
    GAME_STARTED = "game_started"
    GAME_PAUSED = "game_paused"
    GAME_RESUMED = "game_resumed"
    PLATFORM_BOUNCED = "platform_bounced"
    HAZARD_DEFEATED = "hazard_defeated"
    HAZARD_BLOCKED = "hazard_blocked"
    PERFECT_BOUNCE = "perfect_bounce"
    TACO_COLLECTED = "taco_collected"
    COMBO_ACHIEVED = "combo_achieved"
    COMBO_LOST = "combo_lost"
    POWERUP_COLLECTED = "powerup_collected"
    POWERUP_ACTIVATED = "powerup_activated"
    POWERUP_WARNING = "powerup_warning"
    POWERUP_EXPIRED = "powerup_expired"
    MILESTONE_CROSSED = "milestone_crossed"
    NEW_PERSONAL_BEST = "new_personal_best"
    DEATH = "death"
    SCORE_SUBMITTED = "score_submitted"
    SCORE_SUBMISSION_FAILED = "score_submission_failed"


def signal_name(signal: Signal | str) -> str:
    """Normalize a ``Signal`` member or raw string to its wire name."""
    if isinstance(signal, Signal):
        return signal.value
    return signal
