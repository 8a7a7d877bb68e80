"""ascent-physics - Player kinematics, landing detection, camera and particles."""
from __future__ import annotations

from ascent_physics import vec
from ascent_physics.camera import camera_target, update_camera
from ascent_physics.collision import (
    Rect,
    aabb_overlap,
    bounce_velocity,
    expand,
    in_boost_window,
    lands_on,
    padded_overlap,
    rect_of,
)
from ascent_physics.integrator import PlayerPhysics, step_platform, wrap_horizontal
from ascent_physics.particles import ParticleEmitter
from ascent_physics.systems import make_camera_system, make_particle_system, make_physics_system

__all__ = [
    "PlayerPhysics",
    "ParticleEmitter",
    "Rect",
    "aabb_overlap",
    "bounce_velocity",
    "camera_target",
    "expand",
    "in_boost_window",
    "lands_on",
    "make_camera_system",
    "make_particle_system",
    "make_physics_system",
    "padded_overlap",
    "rect_of",
    "step_platform",
    "update_camera",
    "vec",
    "wrap_horizontal",
]
