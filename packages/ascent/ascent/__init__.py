"""ascent - core model and frame loop for a procedural vertical platformer."""

from ascent.clock import FrameClock
from ascent.config import (
    CameraConfig,
    CanvasConfig,
    CollectibleConfig,
    DeathConfig,
    EffectsConfig,
    GameConfig,
    LoopConfig,
    PlatformConfig,
    PlayerConfig,
    PowerupConfig,
    PowerupDef,
    ScoreConfig,
    TierConfig,
    max_jump_reach,
)
from ascent.engine import Engine
from ascent.entities import Camera, Collectible, Particle, Platform, Player, is_well_formed
from ascent.types import (
    CollectibleKind,
    FrameContext,
    GameState,
    Hook,
    PlatformKind,
    PowerupKind,
    System,
)
from ascent.world import World

__all__ = [
    "Engine",
    "World",
    "FrameClock",
    "FrameContext",
    "System",
    "Hook",
    "GameState",
    "PlatformKind",
    "CollectibleKind",
    "PowerupKind",
    "Player",
    "Platform",
    "Collectible",
    "Particle",
    "Camera",
    "is_well_formed",
    "GameConfig",
    "CanvasConfig",
    "LoopConfig",
    "PlayerConfig",
    "TierConfig",
    "PlatformConfig",
    "CollectibleConfig",
    "ScoreConfig",
    "PowerupDef",
    "PowerupConfig",
    "EffectsConfig",
    "CameraConfig",
    "DeathConfig",
    "max_jump_reach",
]
