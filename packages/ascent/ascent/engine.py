"""Engine - lifecycle state machine, frame pacing and ordered systems."""

import os
import random
from typing import Callable

from ascent.clock import FrameClock
from ascent.config import GameConfig
from ascent.types import FrameContext, GameState, Hook, System
from ascent.world import World

TransitionHook = Callable[[GameState, GameState], None]


class Engine:
    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._clock = FrameClock(self._config.loop)
        self._world = World(self._config)
        self._systems: list[System] = []
        self._reset_hooks: list[Hook] = []
        self._game_over_hooks: list[Hook] = []
        self._tick_end_hooks: list[Hook] = []
        self._transition_hooks: list[TransitionHook] = []
        self._state = GameState.WAITING
        self._game_over_reason: str | None = None
        self._end_reason: str | None = None

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def end_reason(self) -> str | None:
        """Why the last run ended, or None while it is still running."""
        return self._end_reason

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_reset(self, hook: Hook) -> None:
        self._reset_hooks.append(hook)

    def on_game_over(self, hook: Hook) -> None:
        self._game_over_hooks.append(hook)

    def on_tick_end(self, hook: Hook) -> None:
        self._tick_end_hooks.append(hook)

    def on_transition(self, hook: TransitionHook) -> None:
        self._transition_hooks.append(hook)

    # -- Lifecycle --

    def _set_state(self, new: GameState) -> None:
        old = self._state
        self._state = new
        for hook in self._transition_hooks:
            hook(old, new)

    def start(self) -> bool:
        """waiting/gameOver -> playing. Resets the world and every timer."""
        if self._state not in (GameState.WAITING, GameState.GAME_OVER):
            return False
        self._world.reset()
        self._clock.reset()
        self._game_over_reason = None
        self._end_reason = None
        ctx = self._clock.context(0.0, self._request_game_over, self._rng)
        for hook in self._reset_hooks:
            hook(self._world, ctx)
        self._set_state(GameState.PLAYING)
        return True

    def pause(self) -> bool:
        if self._state is not GameState.PLAYING:
            return False
        self._set_state(GameState.PAUSED)
        return True

    def resume(self) -> bool:
        if self._state is not GameState.PAUSED:
            return False
        self._clock.resync()
        self._set_state(GameState.PLAYING)
        return True

    def _request_game_over(self, reason: str) -> None:
        if self._game_over_reason is None:
            self._game_over_reason = reason

    # -- Ticking --

    def _tick(self, delta_ms: float) -> None:
        self._clock.advance(delta_ms)
        ctx = self._clock.context(delta_ms, self._request_game_over, self._rng)
        for system in self._systems:
            system(self._world, ctx)
            if self._game_over_reason is not None:
                break

        if self._game_over_reason is not None:
            self._end_reason = self._game_over_reason
            self._set_state(GameState.GAME_OVER)
            for hook in self._game_over_hooks:
                hook(self._world, ctx)

        for hook in self._tick_end_hooks:
            hook(self._world, ctx)

    def frame(self, delta_ms: float) -> bool:
        """Feed one host frame. Returns True when a tick actually ran."""
        if self._state is not GameState.PLAYING:
            return False
        delta = self._clock.accumulate(delta_ms)
        if delta is None:
            return False
        self._tick(delta)
        return True

    def step(self, delta_ms: float | None = None) -> bool:
        """Run exactly one tick, bypassing frame-rate limiting."""
        if self._state is not GameState.PLAYING:
            return False
        if delta_ms is None:
            delta_ms = self._clock.frame_interval_ms
        self._tick(self._clock.clamp(delta_ms))
        return True

    def run(self, n: int, delta_ms: float | None = None) -> int:
        """Step up to ``n`` ticks; stops early when the run ends."""
        ran = 0
        for _ in range(n):
            if not self.step(delta_ms):
                break
            ran += 1
        return ran
