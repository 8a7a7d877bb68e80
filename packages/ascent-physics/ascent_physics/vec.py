"""2D vector helpers operating on (x, y) tuples."""
from __future__ import annotations

import math

Vec = tuple[float, float]


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec) -> Vec:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def from_angle(angle: float, length: float = 1.0) -> Vec:
    """Unit circle point at ``angle`` radians, scaled by ``length``."""
    return (math.cos(angle) * length, math.sin(angle) * length)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t
