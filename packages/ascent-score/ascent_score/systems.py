"""System and hook factories for scoring and the fall-death rule."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from ascent_signal import Signal, SignalBus

from ascent_score.combo import ComboTracker
from ascent_score.death import is_fatal_fall
from ascent_score.scoring import ScoreEvent, ScoreKeeper

if TYPE_CHECKING:
    from ascent import FrameContext, World

_EVENT_SIGNALS = {
    "milestone": Signal.MILESTONE_CROSSED,
    "personal_best": Signal.NEW_PERSONAL_BEST,
}


def publish_score_events(bus: SignalBus | None, events: Iterable[ScoreEvent]) -> None:
    if bus is None:
        return
    for event in events:
        if event.name == "milestone":
            bus.publish(_EVENT_SIGNALS[event.name], score=event.value, step=event.step)
        else:
            bus.publish(_EVENT_SIGNALS[event.name], score=event.value)


def make_score_system(
    keeper: ScoreKeeper,
    combo: ComboTracker,
    bus: SignalBus | None = None,
) -> Callable[[World, FrameContext], None]:
    """Raises the altitude score and lets lapsed combos go."""

    def score_system(world: World, ctx: FrameContext) -> None:
        publish_score_events(bus, keeper.update(world.player.y, world.start_y))
        lost = combo.expire(ctx.elapsed_ms)
        if lost and bus is not None:
            bus.publish(Signal.COMBO_LOST, count=lost)

    return score_system


def make_death_system(
    on_death: Callable[[World, FrameContext], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Ends the run once the player has fallen past the death line."""

    def death_system(world: World, ctx: FrameContext) -> None:
        player = world.player
        if is_fatal_fall(player.y, world.camera.y, world.canvas_height,
                         world.start_y, world.config.death):
            if on_death is not None:
                on_death(world, ctx)
            ctx.request_game_over("fall")

    return death_system


def make_score_reset(
    keeper: ScoreKeeper, combo: ComboTracker,
) -> Callable[[World, FrameContext], None]:
    def score_reset(world: World, ctx: FrameContext) -> None:
        keeper.reset()
        combo.reset()

    return score_reset
