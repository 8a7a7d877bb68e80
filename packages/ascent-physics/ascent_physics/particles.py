"""Cosmetic particle bursts with a hard population cap."""
from __future__ import annotations

import math
import random

from ascent.config import EffectsConfig
from ascent.entities import Particle

from ascent_physics import vec


class ParticleEmitter:
    def __init__(self, config: EffectsConfig, gravity: float = 0.5) -> None:
        self._config = config
        self._gravity = gravity * config.particle_gravity_scale

    @property
    def config(self) -> EffectsConfig:
        return self._config

    def burst(
        self,
        particles: list[Particle],
        x: float,
        y: float,
        kind: str,
        count: int,
        rng: random.Random,
        speed: float = 4.0,
        life: float | None = None,
    ) -> list[Particle]:
        """Spawn ``count`` particles radiating from ``(x, y)``."""
        life = self._config.particle_life if life is None else life
        spawned = []
        for i in range(count):
            angle = 2 * math.pi * i / max(count, 1) + rng.uniform(-0.3, 0.3)
            vx, vy = vec.from_angle(angle, speed * rng.uniform(0.5, 1.0))
            spawned.append(Particle(
                x=x + rng.uniform(-10.0, 10.0),
                y=y + rng.uniform(-5.0, 5.0),
                vx=vx,
                vy=vy - 1.0,
                size=rng.uniform(2.0, 5.0),
                kind=kind,
                life=life,
                max_life=life,
            ))
        particles.extend(spawned)
        self.enforce_cap(particles)
        return spawned

    def update(self, particles: list[Particle], frames: float) -> None:
        if frames <= 0:
            return
        alive = []
        for p in particles:
            p.x += p.vx * frames
            p.y += p.vy * frames
            p.vy += self._gravity * frames
            p.life -= frames
            if p.life <= 0:
                continue
            p.alpha = p.life / p.max_life
            alive.append(p)
        particles[:] = alive
        self.enforce_cap(particles)

    def enforce_cap(self, particles: list[Particle]) -> None:
        """Drop the oldest particles beyond ``max_particles``."""
        excess = len(particles) - self._config.max_particles
        if excess > 0:
            del particles[:excess]
