"""Hook factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ascent_signal.bus import SignalBus

if TYPE_CHECKING:
    from ascent import FrameContext, World


def make_signal_system(bus: SignalBus) -> Callable[[World, FrameContext], None]:
    """Flushes the bus; register with ``Engine.on_tick_end``."""

    def signal_system(world: World, ctx: FrameContext) -> None:
        bus.flush()

    return signal_system
