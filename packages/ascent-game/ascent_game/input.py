"""Input boundary: a held direction plus discrete commands."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class Command(Enum):
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    BOOST = "boost"  # timing bounce, only while playing


@dataclass(frozen=True)
class InputFrame:
    """What the player is doing this frame."""

    direction: int = 0  # -1 left, 0 none, 1 right
    commands: tuple[Command, ...] = ()


@runtime_checkable
class InputSource(Protocol):
    def poll(self) -> InputFrame:
        """Return the current direction and drain pending commands."""
        ...


class QueuedInput:
    """In-memory input source fed by a host (keyboard handler, test, bot)."""

    def __init__(self) -> None:
        self._direction = 0
        self._commands: deque[Command] = deque()

    @property
    def direction(self) -> int:
        return self._direction

    def set_direction(self, direction: int) -> None:
        self._direction = max(-1, min(1, int(direction)))

    def press(self, command: Command) -> None:
        self._commands.append(command)

    def poll(self) -> InputFrame:
        commands = tuple(self._commands)
        self._commands.clear()
        return InputFrame(direction=self._direction, commands=commands)
