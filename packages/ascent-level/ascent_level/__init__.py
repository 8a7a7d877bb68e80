"""ascent-level - Procedural platform and collectible generation."""
from __future__ import annotations

from ascent_level.generator import LevelGenerator
from ascent_level.rng import draw_exclusive, uniform_gap, weighted_choice
from ascent_level.systems import make_level_reset, make_level_system

__all__ = [
    "LevelGenerator",
    "draw_exclusive",
    "make_level_reset",
    "make_level_system",
    "uniform_gap",
    "weighted_choice",
]
