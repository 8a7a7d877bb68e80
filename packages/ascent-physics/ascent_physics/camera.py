"""Upward-only follow camera."""
from __future__ import annotations

from ascent.entities import Camera, Player


def camera_target(player: Player, canvas_height: float, follow_ratio: float) -> float:
    """Camera y that keeps the player ``follow_ratio`` of the way down the view."""
    return player.y - canvas_height * follow_ratio


def update_camera(camera: Camera, target: float, frames: float, follow_speed: float) -> None:
    """Ease toward ``target`` without ever scrolling back down.

    ``camera.y`` is non-increasing over a run; ``max_y`` records the
    highest (smallest) value reached.
    """
    camera.target_y = target
    if frames > 0:
        factor = min(1.0, follow_speed * frames)
        camera.y += (target - camera.y) * factor
    camera.y = min(camera.y, camera.max_y)
    camera.max_y = camera.y
