"""ascent-score - Altitude scoring, combos and the fall-death rule."""
from __future__ import annotations

from ascent_score.combo import ComboState, ComboTracker
from ascent_score.death import death_buffer, is_fatal_fall
from ascent_score.scoring import ScoreEvent, ScoreKeeper, altitude_score
from ascent_score.systems import (
    make_death_system,
    make_score_reset,
    make_score_system,
    publish_score_events,
)

__all__ = [
    "ComboState",
    "ComboTracker",
    "ScoreEvent",
    "ScoreKeeper",
    "altitude_score",
    "death_buffer",
    "is_fatal_fall",
    "make_death_system",
    "make_score_reset",
    "make_score_system",
    "publish_score_events",
]
