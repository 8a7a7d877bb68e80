"""ascent-game - Composition root: resolution, input, snapshots and the Game."""
from __future__ import annotations

from ascent_game.game import Game, create_game
from ascent_game.input import Command, InputFrame, InputSource, QueuedInput
from ascent_game.resolution import CollisionResolver
from ascent_game.snapshot import GameSnapshot

__all__ = [
    "CollisionResolver",
    "Command",
    "Game",
    "GameSnapshot",
    "InputFrame",
    "InputSource",
    "QueuedInput",
    "create_game",
]
