"""System factory for timed power-ups."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ascent.types import PowerupKind
from ascent_signal import Signal, SignalBus

from ascent_powerup.effects import apply_magnet
from ascent_powerup.manager import PowerupManager
from ascent_powerup.types import PowerupPhase

if TYPE_CHECKING:
    from ascent import FrameContext, World


def make_powerup_system(
    manager: PowerupManager,
    bus: SignalBus | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that runs power-up timers and continuous effects.

    Tick order:
    1. Count timers down (warnings, expiry and effect revert)
    2. Apply the magnet pull while it is still active
    """

    def powerup_system(world: World, ctx: FrameContext) -> None:
        for t in manager.tick(ctx.dt_ms, world.player):
            if bus is None:
                continue
            if t.phase is PowerupPhase.WARNING:
                bus.publish(Signal.POWERUP_WARNING, kind=t.kind.value, time_left_ms=t.time_left_ms)
            elif t.phase is PowerupPhase.EXPIRED:
                bus.publish(Signal.POWERUP_EXPIRED, kind=t.kind.value, reason=t.reason)

        if manager.is_active(PowerupKind.MAGNET):
            cfg = manager.config
            apply_magnet(world.player, world.collectibles, ctx.frames,
                         cfg.magnet_range, cfg.magnet_pull)

    return powerup_system


def make_powerup_reset(manager: PowerupManager) -> Callable[[World, FrameContext], None]:
    def powerup_reset(world: World, ctx: FrameContext) -> None:
        manager.clear(world.player)

    return powerup_reset
