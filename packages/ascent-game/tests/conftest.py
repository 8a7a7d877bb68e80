"""Shared fixtures for ascent-game tests."""
from __future__ import annotations

import pytest

from ascent_game import Game


class Recorder:
    def __init__(self, game: Game) -> None:
        self.events: list[tuple[str, dict]] = []
        game.bus.subscribe_all(lambda n, d: self.events.append((n, d)))

    def names(self) -> list[str]:
        return [n for n, _ in self.events]

    def of(self, signal) -> list[dict]:
        return [d for n, d in self.events if n == signal.value]


@pytest.fixture
def game():
    g = Game(seed=1234)
    g.start()
    yield g
    g.shutdown()


@pytest.fixture
def recorder(game):
    return Recorder(game)



@pytest.fixture
def record():
    """Attach a Recorder to a game built inside the test."""
    return Recorder
