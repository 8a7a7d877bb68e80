"""Game - composition root wiring every subsystem onto one Engine.

Tick order:
1. Physics (player, then moving platforms)
2. Collision resolution (landings, hazards, pickups)
3. Camera
4. Score and combo expiry
5. Particles
6. Level streaming (prune, then generate)
7. Power-up timers and magnet
8. Fall-death check

Tick-end hooks harvest leaderboard results and flush signals, and run
even on the tick that ended the run.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ascent import Engine, GameConfig, GameState
from ascent_leaderboard import LeaderboardClient, ScoreSubmitter, SubmitResult, make_leaderboard_system
from ascent_level import LevelGenerator, make_level_reset, make_level_system
from ascent_physics import (
    ParticleEmitter,
    PlayerPhysics,
    make_camera_system,
    make_particle_system,
    make_physics_system,
)
from ascent_powerup import PowerupManager, make_powerup_reset, make_powerup_system
from ascent_score import (
    ComboTracker,
    ScoreKeeper,
    make_death_system,
    make_score_reset,
    make_score_system,
)
from ascent_signal import Signal, SignalBus, make_signal_system

from ascent_game.input import Command, InputSource, QueuedInput
from ascent_game.resolution import CollisionResolver
from ascent_game.snapshot import GameSnapshot

if TYPE_CHECKING:
    from ascent import FrameContext, World


class Game:
    """A playable run loop assembled from injected collaborators.

    Every collaborator is optional; omitted ones are built from ``config``.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        *,
        physics: PlayerPhysics | None = None,
        generator: LevelGenerator | None = None,
        powerups: PowerupManager | None = None,
        keeper: ScoreKeeper | None = None,
        combo: ComboTracker | None = None,
        emitter: ParticleEmitter | None = None,
        resolver: CollisionResolver | None = None,
        bus: SignalBus | None = None,
        leaderboard: LeaderboardClient | None = None,
        submitter: ScoreSubmitter | None = None,
        input_source: InputSource | None = None,
    ) -> None:
        self._engine = Engine(config, seed=seed)
        cfg = self._engine.config
        self.physics = physics if physics is not None else PlayerPhysics(cfg.player)
        self.generator = generator if generator is not None else LevelGenerator(cfg)
        self.powerups = powerups if powerups is not None else PowerupManager(
            cfg.powerups, base_flight_power=cfg.player.base_flight_power,
        )
        self.keeper = keeper if keeper is not None else ScoreKeeper(cfg.score)
        self.combo = combo if combo is not None else ComboTracker(
            cfg.score.combo_window_ms, cfg.score.combo_step_bonus,
        )
        self.emitter = emitter if emitter is not None else ParticleEmitter(
            cfg.effects, gravity=cfg.player.gravity,
        )
        self.bus = bus if bus is not None else SignalBus()
        self.resolver = resolver if resolver is not None else CollisionResolver(
            cfg, self.powerups, self.keeper, self.combo, self.emitter, self.bus,
        )
        self.submitter = submitter if submitter is not None else ScoreSubmitter(leaderboard)
        self.input = input_source if input_source is not None else QueuedInput()
        self._run_id = 0

        self.submitter.on_result(self._on_submit_result)

        engine = self._engine
        engine.on_reset(self._on_reset)
        engine.on_reset(make_level_reset(self.generator))
        engine.on_reset(make_powerup_reset(self.powerups))
        engine.on_reset(make_score_reset(self.keeper, self.combo))

        engine.add_system(make_physics_system(self.physics))
        engine.add_system(self.resolver)
        engine.add_system(make_camera_system())
        engine.add_system(make_score_system(self.keeper, self.combo, self.bus))
        engine.add_system(make_particle_system(self.emitter))
        engine.add_system(make_level_system(self.generator))
        engine.add_system(make_powerup_system(self.powerups, self.bus))
        engine.add_system(make_death_system())

        engine.on_game_over(self._on_game_over)
        engine.on_tick_end(make_leaderboard_system(self.submitter))
        engine.on_tick_end(make_signal_system(self.bus))

    # -- Properties --

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def world(self) -> World:
        return self._engine.world

    @property
    def config(self) -> GameConfig:
        return self._engine.config

    @property
    def state(self) -> GameState:
        return self._engine.state

    @property
    def score(self) -> int:
        return self.keeper.score

    @property
    def best_score(self) -> int:
        return self.keeper.best_score

    @property
    def run_id(self) -> int:
        return self._run_id

    # -- Commands --

    def start(self) -> bool:
        if not self._engine.start():
            return False
        self._run_id += 1
        self.bus.publish(Signal.GAME_STARTED, run=self._run_id, best_score=self.best_score)
        self.bus.flush()
        return True

    def pause(self) -> bool:
        if not self._engine.pause():
            return False
        self.bus.publish(Signal.GAME_PAUSED, score=self.score)
        self.bus.flush()
        return True

    def resume(self) -> bool:
        if not self._engine.resume():
            return False
        self.bus.publish(Signal.GAME_RESUMED, score=self.score)
        self.bus.flush()
        return True

    def boost(self) -> bool:
        """Queue a timing bounce for the next tick; only while playing."""
        if self._engine.state is not GameState.PLAYING:
            return False
        self.resolver.request_boost()
        return True

    def command(self, command: Command) -> bool:
        """Apply a command; ones invalid for the state return False."""
        handlers = {
            Command.START: self.start,
            Command.PAUSE: self.pause,
            Command.RESUME: self.resume,
            Command.BOOST: self.boost,
        }
        return handlers[command]()

    # -- Driving --

    def frame(self, delta_ms: float) -> bool:
        """Poll input, then feed one host frame. Returns True if a tick ran."""
        polled = self.input.poll()
        self.world.direction = polled.direction
        for command in polled.commands:
            self.command(command)
        if self._engine.frame(delta_ms):
            return True
        # No tick ran: still deliver asynchronous results.
        self.submitter.harvest()
        self.bus.flush()
        return False

    def step(self, delta_ms: float | None = None) -> bool:
        """Force one tick (headless drivers, tests)."""
        return self._engine.step(delta_ms)

    def snapshot(self) -> GameSnapshot:
        world = self.world
        return GameSnapshot.capture(
            state=self.state,
            tick_number=self._engine.clock.tick_number,
            elapsed_ms=self._engine.clock.elapsed_ms,
            score=self.score,
            best_score=self.best_score,
            combo=self.combo.count(self._engine.clock.elapsed_ms),
            player=world.player,
            platforms=tuple(world.platforms),
            collectibles=tuple(world.collectibles),
            particles=tuple(world.particles),
            camera=world.camera,
            powerups=tuple(self.powerups.active()),
            end_reason=self._engine.end_reason,
        )

    def shutdown(self) -> None:
        self.submitter.shutdown()

    # -- Hooks --

    def _on_reset(self, world: World, ctx: FrameContext) -> None:
        self.bus.clear()
        self.resolver.reset()

    def _on_game_over(self, world: World, ctx: FrameContext) -> None:
        final = self.keeper.finish()
        self.bus.publish(Signal.DEATH, reason=self._engine.end_reason, score=final,
                         best_score=self.keeper.best_score)
        self.submitter.submit(self._run_id, final)

    def _on_submit_result(self, score: int, result: SubmitResult) -> None:
        if result.success:
            self.bus.publish(Signal.SCORE_SUBMITTED, score=score)
        else:
            self.bus.publish(Signal.SCORE_SUBMISSION_FAILED, score=score,
                             skipped=result.skipped, error=result.error)


def create_game(
    config: GameConfig | None = None,
    seed: int | None = None,
    leaderboard: LeaderboardClient | None = None,
    input_source: InputSource | None = None,
) -> Game:
    """Build a Game with default collaborators."""
    return Game(config, seed, leaderboard=leaderboard, input_source=input_source)
