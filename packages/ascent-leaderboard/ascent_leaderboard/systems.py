"""Hook factory for harvesting score submissions."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ascent_leaderboard.submitter import ScoreSubmitter

if TYPE_CHECKING:
    from ascent import FrameContext, World


def make_leaderboard_system(
    submitter: ScoreSubmitter,
) -> Callable[[World, FrameContext], None]:
    """Harvests finished submissions; register with ``Engine.on_tick_end``."""

    def leaderboard_system(world: World, ctx: FrameContext) -> None:
        submitter.harvest()

    return leaderboard_system
