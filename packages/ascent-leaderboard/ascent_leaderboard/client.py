"""Leaderboard client protocol and mock implementation."""
from __future__ import annotations

import random as _random_mod
import threading
import time
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class LeaderboardError(Exception):
    """Exception raised by leaderboard client operations."""


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one score submission."""

    success: bool
    skipped: bool = False
    error: str | None = None


@runtime_checkable
class LeaderboardClient(Protocol):
    """Protocol for leaderboard client implementations.

    Implementations make blocking calls (invoked inside a thread pool
    worker). Any exception may be raised on failure -- the submitter
    catches it and reports a failed submission.
    """

    def submit_score(self, score: int) -> SubmitResult:
        """Record ``score`` for the current player."""
        ...


class MockLeaderboard:
    """In-memory leaderboard for testing.

    Conforms to the LeaderboardClient protocol. Supports latency
    simulation and error injection.

    Args:
        latency: Simulated delay in seconds before returning (default 0.0).
        error_rate: Probability of raising an exception (0.0--1.0).
        error_exception: The exception instance to raise on simulated error.
            Defaults to LeaderboardError("mock error") if None.
        reject: When True, every submission returns ``success=False``.
    """

    def __init__(
        self,
        latency: float = 0.0,
        error_rate: float = 0.0,
        error_exception: BaseException | None = None,
        reject: bool = False,
    ) -> None:
        self._latency = latency
        self._error_rate = error_rate
        self._error_exception = (
            error_exception if error_exception is not None
            else LeaderboardError("mock error")
        )
        self._reject = reject
        self._rng = _random_mod.Random()
        self._lock = threading.Lock()
        self.scores: list[int] = []

    def submit_score(self, score: int) -> SubmitResult:
        if self._error_rate > 0.0 and self._rng.random() < self._error_rate:
            raise self._error_exception

        if self._latency > 0.0:
            time.sleep(self._latency)

        if self._reject:
            return SubmitResult(success=False, error="rejected")

        with self._lock:
            self.scores.append(score)
        return SubmitResult(success=True)

    def top(self, n: int = 10) -> list[int]:
        with self._lock:
            return sorted(self.scores, reverse=True)[:n]
