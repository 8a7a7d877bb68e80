"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

import sys
from typing import Any, Callable

from ascent_signal.signals import Signal, signal_name

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues signals during a tick and dispatches them on ``flush``.

    A failing handler is reported on stderr and does not stop delivery to
    the remaining handlers or signals.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal: Signal | str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name(signal), []).append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        for signal in Signal:
            self.subscribe(signal, handler)

    def unsubscribe(self, signal: Signal | str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name(signal))
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal: Signal | str, **data: Any) -> None:
        self._queue.append((signal_name(signal), data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for name, data in snapshot:
            for handler in list(self._subscribers.get(name, [])):
                try:
                    handler(name, data)
                except Exception:
                    print(
                        f"ascent-signal: handler error: {sys.exc_info()[1]}",
                        file=sys.stderr,
                    )

    def clear(self) -> None:
        self._queue.clear()
