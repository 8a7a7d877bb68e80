"""Altitude score, bonuses, milestones and personal best."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ascent.config import ScoreConfig


def altitude_score(player_y: float, start_y: float, divisor: float, multiplier: int) -> int:
    """Score for having climbed to ``player_y`` (``y`` grows downward)."""
    return math.floor(max(0.0, start_y - player_y) / divisor) * multiplier


@dataclass(frozen=True)
class ScoreEvent:
    """Something noteworthy that happened to the score this update."""

    name: str  # "milestone" or "personal_best"
    value: int
    step: int = 0


class ScoreKeeper:
    """Run score: best altitude reached plus collected bonuses.

    Neither part can go down during a run, so the score is monotonic.
    ``best_score`` persists across runs until the keeper is discarded.
    """

    def __init__(self, config: ScoreConfig, best_score: int = 0) -> None:
        self._config = config
        self._altitude = 0
        self._bonus = 0
        self._best_score = best_score
        self._prior_best = best_score
        self._best_announced = False

    @property
    def score(self) -> int:
        return self._altitude + self._bonus

    @property
    def altitude(self) -> int:
        return self._altitude

    @property
    def bonus(self) -> int:
        return self._bonus

    @property
    def best_score(self) -> int:
        return self._best_score

    def reset(self) -> None:
        self._altitude = 0
        self._bonus = 0
        self._prior_best = self._best_score
        self._best_announced = False

    def update(self, player_y: float, start_y: float) -> list[ScoreEvent]:
        cfg = self._config
        reached = altitude_score(player_y, start_y, cfg.height_divisor, cfg.height_multiplier)
        if reached <= self._altitude:
            return []
        before = self.score
        self._altitude = reached
        return self._events(before)

    def add_bonus(self, points: int) -> list[ScoreEvent]:
        if points <= 0:
            return []
        before = self.score
        self._bonus += points
        return self._events(before)

    def _events(self, before: int) -> list[ScoreEvent]:
        after = self.score
        events: list[ScoreEvent] = []
        for step in sorted(self._config.milestone_steps, reverse=True):
            if after // step > before // step:
                events.append(ScoreEvent("milestone", (after // step) * step, step))
        if not self._best_announced and self._prior_best > 0 and after > self._prior_best:
            self._best_announced = True
            events.append(ScoreEvent("personal_best", after))
        return events

    def finish(self) -> int:
        """Fold the final score into ``best_score``; returns the final score."""
        final = self.score
        if final > self._best_score:
            self._best_score = final
        return final
