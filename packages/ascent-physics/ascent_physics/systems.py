"""System factories for physics simulation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ascent_physics.camera import camera_target, update_camera
from ascent_physics.integrator import PlayerPhysics, step_platform
from ascent_physics.particles import ParticleEmitter

if TYPE_CHECKING:
    from ascent import FrameContext, World


def make_physics_system(physics: PlayerPhysics) -> Callable[["World", "FrameContext"], None]:
    """Integrates the player with the world's held direction, then platforms."""

    def physics_system(world: "World", ctx: "FrameContext") -> None:
        physics.step(world.player, world.direction, ctx.frames, world.canvas_width)
        for platform in world.platforms:
            step_platform(platform, ctx.frames, world.canvas_width)

    return physics_system


def make_camera_system() -> Callable[["World", "FrameContext"], None]:
    def camera_system(world: "World", ctx: "FrameContext") -> None:
        cfg = world.config.camera
        target = camera_target(world.player, world.canvas_height, cfg.follow_ratio)
        update_camera(world.camera, target, ctx.frames, cfg.follow_speed)

    return camera_system


def make_particle_system(emitter: ParticleEmitter) -> Callable[["World", "FrameContext"], None]:
    def particle_system(world: "World", ctx: "FrameContext") -> None:
        emitter.update(world.particles, ctx.frames)

    return particle_system
