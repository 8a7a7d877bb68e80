"""Fire-and-forget final score submission on a thread pool.

Dispatch happens once per completed run and never blocks the frame;
results are harvested on later frames and reported through callbacks.
"""
from __future__ import annotations

import sys
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Callable

from ascent_leaderboard.client import LeaderboardClient, SubmitResult

ResultCallback = Callable[[int, SubmitResult], None]


@dataclass(frozen=True)
class _PendingSubmission:
    run_id: int
    score: int
    future: Future[SubmitResult]


class ScoreSubmitter:
    """Submits each run's final score at most once.

    ``client`` may be None, in which case every submission is skipped.
    """

    def __init__(
        self,
        client: LeaderboardClient | None,
        max_workers: int = 1,
    ) -> None:
        self._client = client
        self._executor = ThreadPoolExecutor(max_workers=max_workers)
        self._pending: list[_PendingSubmission] = []
        self._submitted_runs: set[int] = set()
        self._on_result: list[ResultCallback] = []
        self._shutdown = False

    @property
    def pending(self) -> int:
        return len(self._pending)

    def on_result(self, callback: ResultCallback) -> None:
        self._on_result.append(callback)

    def submit(self, run_id: int, score: int) -> bool:
        """Dispatch ``score`` for ``run_id``. Returns True when dispatched."""
        if self._shutdown or run_id in self._submitted_runs:
            return False
        self._submitted_runs.add(run_id)
        if score <= 0:
            return False
        if self._client is None:
            self._fire(score, SubmitResult(success=False, skipped=True, error="no client"))
            return False
        future = self._executor.submit(self._client.submit_score, score)
        self._pending.append(_PendingSubmission(run_id, score, future))
        return True

    def harvest(self) -> list[SubmitResult]:
        """Collect finished submissions and fire result callbacks."""
        results: list[SubmitResult] = []
        still_pending: list[_PendingSubmission] = []
        for entry in self._pending:
            if not entry.future.done():
                still_pending.append(entry)
                continue
            exc = entry.future.exception()
            if exc is not None:
                result = SubmitResult(success=False, error=str(exc))
            else:
                result = entry.future.result()
            results.append(result)
            self._fire(entry.score, result)
        self._pending = still_pending
        return results

    def wait(self, timeout: float | None = None) -> list[SubmitResult]:
        """Block until every pending submission finishes, then harvest."""
        for entry in list(self._pending):
            try:
                entry.future.exception(timeout=timeout)
            except FutureTimeoutError:
                break
        return self.harvest()

    def shutdown(self) -> None:
        """Shut down the thread pool and discard pending submissions."""
        self._shutdown = True
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._pending.clear()

    def _fire(self, score: int, result: SubmitResult) -> None:
        for cb in self._on_result:
            try:
                cb(score, result)
            except Exception:
                print(
                    f"ascent-leaderboard: on_result callback error: {sys.exc_info()[1]}",
                    file=sys.stderr,
                )
