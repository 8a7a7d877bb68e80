"""Pure collision detection functions on axis-aligned rectangles.

Rectangles are ``(x, y, width, height)`` with ``(x, y)`` the top-left
corner; ``y`` grows downward.
"""
from __future__ import annotations

from typing import Mapping

from ascent.entities import Platform, Player
from ascent.types import PlatformKind

Rect = tuple[float, float, float, float]


def rect_of(entity) -> Rect:
    return (entity.x, entity.y, entity.width, entity.height)


def aabb_overlap(a: Rect, b: Rect) -> bool:
    """Strict overlap; touching edges do not collide."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def expand(rect: Rect, padding: float, scale: float = 1.0) -> Rect:
    """Scale ``rect`` about its center, then grow every side by ``padding``."""
    x, y, w, h = rect
    sw = w * scale
    sh = h * scale
    sx = x - (sw - w) / 2
    sy = y - (sh - h) / 2
    return (sx - padding, sy - padding, sw + 2 * padding, sh + 2 * padding)


def padded_overlap(a: Rect, target: Rect, padding: float, scale: float = 1.0) -> bool:
    """Generous pickup test: ``target`` is enlarged before the AABB check."""
    return aabb_overlap(a, expand(target, padding, scale))


def lands_on(player: Player, platform: Platform, tolerance: float) -> bool:
    """Swept landing test for a falling player.

    True only when the player moves down, overlaps the platform
    horizontally, and its bottom edge crossed the platform top during the
    last integration step. A fast fall can not tunnel through.
    """
    if player.vy <= 0:
        return False
    if player.x + player.width <= platform.x or player.x >= platform.x + platform.width:
        return False
    top = platform.y
    prev_bottom = player.prev_y + player.height
    return prev_bottom <= top + tolerance and player.bottom >= top


def in_boost_window(player: Player, platform: Platform, window: float) -> bool:
    """True when a falling player's feet are within ``window`` of the top.

    The player's horizontal center must be over the platform.
    """
    if player.vy <= 0:
        return False
    cx = player.x + player.width / 2
    if cx < platform.x or cx > platform.x + platform.width:
        return False
    return platform.y - window <= player.bottom <= platform.y + window


def bounce_velocity(
    kind: PlatformKind,
    jump_force: float,
    multipliers: Mapping[PlatformKind, float],
) -> float:
    """Upward (negative) velocity imparted by landing on ``kind``."""
    return -jump_force * multipliers.get(kind, 1.0)
