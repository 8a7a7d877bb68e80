"""Combo multiplier for rapid taco collection."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class ComboState:
    count: int = 0
    expires_at_ms: float = -math.inf
    last_collection_ms: float = -math.inf


class ComboTracker:
    """Tracks consecutive collections inside a rolling time window.

    Every collection opens (or extends) a window of ``window_ms``. A
    collection that lands inside the previous window raises the count and
    earns ``step_bonus`` extra per count; one outside resets it.
    """

    def __init__(self, window_ms: float = 2000.0, step_bonus: float = 0.2) -> None:
        self._window_ms = window_ms
        self._step_bonus = step_bonus
        self._state = ComboState()

    @property
    def state(self) -> ComboState:
        return self._state

    def count(self, now_ms: float) -> int:
        """Live combo count; 0 once the window has lapsed."""
        if now_ms > self._state.expires_at_ms:
            return 0
        return self._state.count

    def collect(self, now_ms: float, base: int) -> tuple[int, int]:
        """Register a collection at ``now_ms``. Returns ``(bonus, count)``."""
        state = self._state
        if now_ms <= state.expires_at_ms:
            state.count += 1
            bonus = math.floor(base * (1 + state.count * self._step_bonus))
        else:
            state.count = 0
            bonus = base
        state.expires_at_ms = now_ms + self._window_ms
        state.last_collection_ms = now_ms
        return bonus, state.count

    def expire(self, now_ms: float) -> int:
        """Clear a lapsed combo. Returns the count that was lost, else 0."""
        state = self._state
        if state.count and now_ms > state.expires_at_ms:
            lost = state.count
            state.count = 0
            return lost
        return 0

    def reset(self) -> None:
        self._state = ComboState()
