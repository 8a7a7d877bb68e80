"""FrameClock - host delta pacing and FrameContext construction."""

import random
from typing import Callable

from ascent.config import LoopConfig
from ascent.types import FrameContext


class FrameClock:
    """Turns irregular host deltas into clamped, rate-limited ticks.

    Deltas shorter than the frame interval are held back and added to the
    next one. A tick never covers more than ``max_delta_ms``.
    """

    def __init__(self, config: LoopConfig) -> None:
        self._config = config
        self._pending_ms = 0.0
        self._discard_next = False
        self._tick_number = 0
        self._elapsed_ms = 0.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> float:
        """Simulated time of the current run (sum of clamped deltas)."""
        return self._elapsed_ms

    @property
    def frame_interval_ms(self) -> float:
        return self._config.frame_interval_ms

    def clamp(self, delta_ms: float) -> float:
        if delta_ms != delta_ms or delta_ms <= 0:  # NaN or non-positive
            return 0.0
        return min(delta_ms, self._config.max_delta_ms)

    def accumulate(self, delta_ms: float) -> float | None:
        """Feed a host delta. Returns the clamped tick delta, or None to skip."""
        if self._discard_next:
            self._discard_next = False
            return None
        if delta_ms != delta_ms or delta_ms <= 0:
            return None
        self._pending_ms += delta_ms
        if self._pending_ms < self._config.frame_interval_ms:
            return None
        delta = self.clamp(self._pending_ms)
        self._pending_ms = 0.0
        return delta

    def resync(self) -> None:
        """Forget time that passed while not ticking; drop the next delta."""
        self._pending_ms = 0.0
        self._discard_next = True

    def advance(self, delta_ms: float) -> int:
        self._tick_number += 1
        self._elapsed_ms += delta_ms
        return self._tick_number

    def context(
        self,
        delta_ms: float,
        game_over_fn: Callable[[str], None],
        rng: random.Random,
    ) -> FrameContext:
        return FrameContext(
            tick_number=self._tick_number,
            dt_ms=delta_ms,
            frames=delta_ms / self._config.reference_frame_ms,
            elapsed_ms=self._elapsed_ms,
            request_game_over=game_over_fn,
            random=rng,
        )

    def reset(self) -> None:
        self._pending_ms = 0.0
        self._discard_next = False
        self._tick_number = 0
        self._elapsed_ms = 0.0
