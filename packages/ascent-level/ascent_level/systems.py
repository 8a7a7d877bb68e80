"""System and hook factories for level streaming."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ascent.entities import is_well_formed

from ascent_level.generator import LevelGenerator

if TYPE_CHECKING:
    from ascent import FrameContext, World


def make_level_reset(generator: LevelGenerator) -> Callable[["World", "FrameContext"], None]:
    """Seeds the opening platforms and collectibles; register with ``Engine.on_reset``."""

    def level_reset(world: "World", ctx: "FrameContext") -> None:
        generator.reset()
        world.platforms.extend(generator.initial_platforms(world, ctx.random))
        world.collectibles.extend(generator.initial_collectibles(world, ctx.random))

    return level_reset


def make_level_system(generator: LevelGenerator) -> Callable[["World", "FrameContext"], None]:
    """Prunes what scrolled out below and generates what is coming above.

    Broken platforms, collected collectibles and malformed entities are
    dropped here too.
    """

    def level_system(world: "World", ctx: "FrameContext") -> None:
        removal = world.removal_line()
        world.platforms[:] = [
            p for p in world.platforms
            if not p.broken and p.y <= removal and is_well_formed(p)
        ]
        world.collectibles[:] = [
            c for c in world.collectibles
            if not c.collected and c.y <= removal and is_well_formed(c)
        ]

        line = world.generation_line()
        top = world.highest_platform()
        top_y = top.y if top is not None else world.player.bottom
        if top_y > line:
            recent = sorted(world.platforms, key=lambda p: -p.y)
            world.platforms.extend(generator.generate_range(
                top_y, line, world.canvas_width, ctx.random, world.start_y,
                previous=recent[-generator.history_size:],
            ))
        world.collectibles.extend(generator.extend_collectibles(world, ctx.random, line))

    return level_system
