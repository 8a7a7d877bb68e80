"""Collision resolution: landings, timing bounces, hazards and pickups.

Detection lives in ``ascent_physics.collision``; this module decides what
a contact means for the run (bounce, break, defeat, death, score).
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ascent.config import GameConfig
from ascent.entities import Collectible, Platform, is_well_formed
from ascent.types import CollectibleKind, PlatformKind, PowerupKind
from ascent_physics import (
    ParticleEmitter,
    bounce_velocity,
    in_boost_window,
    lands_on,
    padded_overlap,
    rect_of,
)
from ascent_powerup import PowerupManager
from ascent_score import ComboTracker, ScoreKeeper, publish_score_events
from ascent_signal import Signal, SignalBus

if TYPE_CHECKING:
    from ascent import FrameContext, World


class CollisionResolver:
    """Callable system resolving player contacts once per tick.

    At most one platform landing is resolved per tick. A platform's first
    landing emits one ``platform_bounced`` signal and one particle burst.
    A requested timing bounce is tried before landings, on simulated time.
    """

    def __init__(
        self,
        config: GameConfig,
        powerups: PowerupManager,
        keeper: ScoreKeeper,
        combo: ComboTracker,
        emitter: ParticleEmitter,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config
        self._powerups = powerups
        self._keeper = keeper
        self._combo = combo
        self._emitter = emitter
        self._bus = bus
        self._boost_requested = False
        self._last_boost_ms = -math.inf

    def request_boost(self) -> None:
        """Try a timing bounce on the next tick."""
        self._boost_requested = True

    def reset(self) -> None:
        self._boost_requested = False
        self._last_boost_ms = -math.inf

    def __call__(self, world: World, ctx: FrameContext) -> None:
        if self._boost_requested:
            self._boost_requested = False
            self.try_boost(world, ctx)
        if not self.resolve_platforms(world, ctx):
            return
        self.resolve_collectibles(world, ctx)

    # ------------------------------------------------------------------
    # Platforms
    # ------------------------------------------------------------------

    def resolve_platforms(self, world: World, ctx: FrameContext) -> bool:
        """Resolve the first landing. Returns False when the run ended."""
        player = world.player
        player.grounded = False
        tolerance = self._config.platform.landing_tolerance
        for platform in world.platforms:
            if platform.broken or not is_well_formed(platform):
                continue
            if not lands_on(player, platform, tolerance):
                continue
            if platform.kind is PlatformKind.EVIL:
                return self._resolve_hazard(world, ctx, platform)
            self._bounce(world, ctx, platform, platform.kind)
            if platform.kind is PlatformKind.BREAKING:
                platform.broken = True
            return True
        return True

    def _bounce(
        self,
        world: World,
        ctx: FrameContext,
        platform: Platform,
        kind: PlatformKind,
    ) -> None:
        player = world.player
        player.vy = bounce_velocity(kind, self._config.player.jump_force,
                                    self._config.platform.bounce_multipliers)
        player.y = platform.y - player.height
        player.grounded = True
        if platform.touched:
            return
        platform.touched = True
        effects = self._config.effects
        count = effects.spring_particles.get(kind, effects.bounce_particles)
        particle_kind = "spark" if kind in effects.spring_particles else "feather"
        self._emitter.burst(world.particles, platform.x + platform.width / 2, platform.y,
                            particle_kind, count, ctx.random)
        self._publish(Signal.PLATFORM_BOUNCED, kind=platform.kind.value,
                      x=platform.x, y=platform.y, velocity=player.vy)

    def _resolve_hazard(self, world: World, ctx: FrameContext, platform: Platform) -> bool:
        player = world.player
        effects = self._config.effects
        cx = platform.x + platform.width / 2

        if self._powerups.is_active(PowerupKind.CORN):
            platform.kind = PlatformKind.NORMAL
            platform.touched = True
            player.vy = -self._config.player.jump_force * self._config.powerups.defeat_bounce
            player.y = platform.y - player.height
            player.grounded = True
            self._emitter.burst(world.particles, cx, platform.y, "victory",
                                effects.victory_particles, ctx.random, speed=6.5)
            bonus = self._config.score.hazard_defeat_bonus
            publish_score_events(self._bus, self._keeper.add_bonus(bonus))
            self._publish(Signal.HAZARD_DEFEATED, x=platform.x, y=platform.y, bonus=bonus)
            return True

        if self._powerups.is_active(PowerupKind.SHIELD):
            self._bounce(world, ctx, platform, PlatformKind.NORMAL)
            self._publish(Signal.HAZARD_BLOCKED, x=platform.x, y=platform.y)
            return True

        self._emitter.burst(world.particles, cx, platform.y, "danger",
                            effects.hazard_particles, ctx.random, speed=7.0)
        ctx.request_game_over("hazard")
        return False

    # ------------------------------------------------------------------
    # Timing bounce
    # ------------------------------------------------------------------

    def try_boost(self, world: World, ctx: FrameContext) -> bool:
        """Launch off the platform the player is about to land on.

        Needs a falling player whose feet are within ``boost_window`` of an
        intact platform, and ``boost_cooldown_ms`` of simulated time since
        the last successful boost.
        """
        pc = self._config.player
        if ctx.elapsed_ms - self._last_boost_ms < pc.boost_cooldown_ms:
            return False
        player = world.player
        if not any(
            not p.broken and is_well_formed(p) and in_boost_window(player, p, pc.boost_window)
            for p in world.platforms
        ):
            return False
        self._last_boost_ms = ctx.elapsed_ms
        player.vy = -pc.jump_force * pc.boost_multiplier
        bonus = self._config.score.boost_bonus
        events = self._keeper.add_bonus(bonus)
        self._emitter.burst(world.particles, player.x + player.width / 2, player.bottom,
                            "boost", self._config.effects.boost_particles, ctx.random)
        self._publish(Signal.PERFECT_BOUNCE, bonus=bonus, velocity=player.vy)
        publish_score_events(self._bus, events)
        return True

    # ------------------------------------------------------------------
    # Collectibles
    # ------------------------------------------------------------------

    def resolve_collectibles(self, world: World, ctx: FrameContext) -> None:
        cc = self._config.collectibles
        player_rect = rect_of(world.player)
        for item in world.collectibles:
            if item.collected or not is_well_formed(item):
                continue
            if item.kind is CollectibleKind.TACO:
                if padded_overlap(player_rect, rect_of(item), cc.taco_hit_padding, cc.taco_hit_scale):
                    self._collect_taco(world, ctx, item)
            elif padded_overlap(player_rect, rect_of(item), cc.powerup_hit_padding):
                self._collect_powerup(world, ctx, item)

    def _collect_taco(self, world: World, ctx: FrameContext, taco: Collectible) -> None:
        taco.collected = True
        bonus, count = self._combo.collect(ctx.elapsed_ms, self._config.score.taco_bonus)
        events = self._keeper.add_bonus(bonus)
        cx, cy = taco.center
        self._emitter.burst(world.particles, cx, cy, "taco",
                            self._config.effects.taco_particles, ctx.random)
        self._publish(Signal.TACO_COLLECTED, bonus=bonus, combo=count)
        if count > 0:
            self._publish(Signal.COMBO_ACHIEVED, combo=count, bonus=bonus)
        publish_score_events(self._bus, events)

    def _collect_powerup(self, world: World, ctx: FrameContext, item: Collectible) -> None:
        item.collected = True
        kind = item.powerup
        self._publish(Signal.POWERUP_COLLECTED, kind=kind.value)
        for evicted in self._powerups.activate(kind, world.player):
            self._publish(Signal.POWERUP_EXPIRED, kind=evicted.value, reason="evicted")
        self._publish(Signal.POWERUP_ACTIVATED, kind=kind.value,
                      duration_ms=self._config.powerups.kinds[kind].duration_ms)
        cx, cy = item.center
        self._emitter.burst(world.particles, cx, cy, kind.value,
                            self._config.effects.powerup_particles, ctx.random)
        publish_score_events(self._bus, self._keeper.add_bonus(self._config.score.powerup_bonus))

    def _publish(self, signal: Signal, **data) -> None:
        if self._bus is not None:
            self._bus.publish(signal, **data)
