"""Frozen configuration dataclasses for the ascent core.

Every tunable lives here. Defaults reproduce the shipped tuning; derive
variants with ``dataclasses.replace``. Invalid values raise ``ValueError``
at construction time.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from ascent.types import PlatformKind, PowerupKind


def max_jump_reach(jump_force: float, gravity: float) -> float:
    """Peak height of a single unassisted jump: v**2 / (2g)."""
    if gravity <= 0:
        raise ValueError("gravity must be positive")
    return jump_force * jump_force / (2.0 * gravity)


@dataclass(frozen=True)
class CanvasConfig:
    width: int = 320
    height: int = 480

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas dimensions must be positive")


@dataclass(frozen=True)
class LoopConfig:
    """Frame pacing.

    Attributes:
        target_fps: Frames per second the loop is limited to.
        max_delta_ms: Upper bound on a single tick's delta (stall recovery).
        reference_frame_ms: Duration the per-frame physics constants assume.
    """

    target_fps: int = 60
    max_delta_ms: float = 50.0
    reference_frame_ms: float = 16.67

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")
        if self.max_delta_ms <= 0:
            raise ValueError("max_delta_ms must be positive")
        if self.reference_frame_ms <= 0:
            raise ValueError("reference_frame_ms must be positive")

    @property
    def frame_interval_ms(self) -> float:
        return 1000.0 / self.target_fps


@dataclass(frozen=True)
class PlayerConfig:
    width: float = 32.0
    height: float = 32.0
    jump_force: float = 16.0
    gravity: float = 0.5
    max_speed: float = 5.5
    move_acceleration: float = 1.5
    friction: float = 0.85
    terminal_velocity: float = 15.0
    max_horizontal_velocity: float = 15.0
    wrap_edges: bool = True
    start_offset: float = 150.0  # distance of the spawn point above the canvas bottom
    rotation_factor: float = 0.05
    rotation_smoothing: float = 0.2
    base_flight_power: float = 0.15
    flight_gravity_scale: float = 0.3
    flight_lift: float = 0.6
    max_flight_speed: float = 12.0
    boost_multiplier: float = 1.15
    boost_window: float = 20.0  # feet within this far of a platform top while falling
    boost_cooldown_ms: float = 100.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("player size must be positive")
        if self.jump_force <= 0:
            raise ValueError("jump_force must be positive")
        if self.gravity <= 0:
            raise ValueError("gravity must be positive")
        if not 0.0 < self.friction <= 1.0:
            raise ValueError("friction must be in (0, 1]")
        if self.boost_window < 0 or self.boost_cooldown_ms < 0:
            raise ValueError("boost_window and boost_cooldown_ms must not be negative")

    @property
    def jump_reach(self) -> float:
        return max_jump_reach(self.jump_force, self.gravity)


@dataclass(frozen=True)
class TierConfig:
    """Altitude band: applies from ``min_altitude`` pixels above the start."""

    name: str
    min_altitude: float
    min_gap: float
    max_gap: float
    kind_chances: dict[PlatformKind, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.min_gap <= 0 or self.max_gap < self.min_gap:
            raise ValueError(
                f"tier {self.name!r}: need 0 < min_gap <= max_gap"
            )
        if PlatformKind.NORMAL in self.kind_chances:
            raise ValueError(f"tier {self.name!r}: NORMAL is the default kind")
        if sum(self.kind_chances.values()) > 1.0:
            raise ValueError(f"tier {self.name!r}: kind chances exceed 1.0")


def _default_tiers() -> tuple[TierConfig, ...]:
    return (
        TierConfig("easy", 0.0, 15.0, 30.0, {
            PlatformKind.MINISPRING: 0.20,
        }),
        TierConfig("normal", 400.0, 20.0, 50.0, {
            PlatformKind.SPRING: 0.06,
            PlatformKind.MINISPRING: 0.10,
            PlatformKind.MOVING: 0.10,
            PlatformKind.CLOUD: 0.08,
            PlatformKind.BREAKING: 0.06,
            PlatformKind.EVIL: 0.02,
        }),
        TierConfig("hard", 2500.0, 30.0, 60.0, {
            PlatformKind.SUPERSPRING: 0.02,
            PlatformKind.SPRING: 0.10,
            PlatformKind.MINISPRING: 0.12,
            PlatformKind.MOVING: 0.10,
            PlatformKind.CLOUD: 0.08,
            PlatformKind.BREAKING: 0.10,
            PlatformKind.EVIL: 0.03,
        }),
    )


def _default_bounce() -> dict[PlatformKind, float]:
    return {
        PlatformKind.MINISPRING: 1.35,
        PlatformKind.SPRING: 1.7,
        PlatformKind.SUPERSPRING: 2.1,
    }


@dataclass(frozen=True)
class PlatformConfig:
    width: float = 60.0
    height: float = 12.0
    tiers: tuple[TierConfig, ...] = field(default_factory=_default_tiers)
    bounce_multipliers: dict[PlatformKind, float] = field(default_factory=_default_bounce)
    landing_tolerance: float = 5.0
    moving_speed: float = 2.0
    horizontal_reach: float = 235.0
    # Assist springs: vertical ratios are of the jump reach, horizontal
    # ratios of horizontal_reach. Only spring_window platforms are looked at.
    spring_window: int = 3
    safety_gap_ratio: float = 0.6
    assist_gap_ratio: float = 0.7
    superspring_gap_ratio: float = 0.85
    horizontal_assist_ratio: float = 0.6
    horizontal_superspring_ratio: float = 0.8
    safety_spring_chance: float = 0.8
    recovery_spring_chance: float = 0.7
    # EVIL placement gate
    evil_spacing: int = 5
    evil_min_altitude: float = 800.0
    evil_min_safe: int = 2
    evil_base_chance: float = 0.7
    evil_chance_falloff: float = 0.3
    evil_falloff_altitude: float = 10000.0
    edge_margin: float = 60.0
    risky_horizontal_gap: float = 100.0
    start_extra_width: float = 120.0
    start_drop: float = 10.0  # start platform sits this far below the player's feet
    first_gap: float = 100.0
    initial_height: float = 2000.0
    generate_ahead: float = 500.0
    prune_margin: float = 200.0

    def __post_init__(self) -> None:
        if not self.tiers:
            raise ValueError("at least one altitude tier is required")
        if self.tiers[0].min_altitude > 0:
            raise ValueError("the first tier must start at altitude 0")
        altitudes = [t.min_altitude for t in self.tiers]
        if altitudes != sorted(altitudes):
            raise ValueError("tiers must be ordered by min_altitude")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("platform size must be positive")
        if not 0.0 < self.safety_gap_ratio <= self.assist_gap_ratio <= self.superspring_gap_ratio:
            raise ValueError("need 0 < safety_gap_ratio <= assist_gap_ratio <= superspring_gap_ratio")
        if not 0.0 < self.horizontal_assist_ratio <= self.horizontal_superspring_ratio:
            raise ValueError("need 0 < horizontal_assist_ratio <= horizontal_superspring_ratio")
        if self.spring_window < 1 or self.evil_spacing < 1:
            raise ValueError("spring_window and evil_spacing must be at least 1")
        if self.evil_falloff_altitude <= 0:
            raise ValueError("evil_falloff_altitude must be positive")


@dataclass(frozen=True)
class CollectibleConfig:
    taco_size: float = 20.0
    powerup_size: float = 25.0
    initial_tacos: int = 15
    initial_taco_offset: float = 200.0
    taco_spacing: float = 150.0
    taco_jitter: float = 100.0
    initial_powerups: int = 3
    initial_powerup_offset: float = 600.0
    powerup_spacing: float = 500.0
    powerup_jitter: float = 300.0
    powerup_spawn_chance: float = 0.25
    taco_hit_scale: float = 3.0
    taco_hit_padding: float = 16.0
    powerup_hit_padding: float = 8.0

    def __post_init__(self) -> None:
        if self.taco_spacing <= 0 or self.powerup_spacing <= 0:
            raise ValueError("collectible spacing must be positive")
        if not 0.0 <= self.powerup_spawn_chance <= 1.0:
            raise ValueError("powerup_spawn_chance must be in [0, 1]")


@dataclass(frozen=True)
class ScoreConfig:
    height_divisor: float = 10.0
    height_multiplier: int = 1
    taco_bonus: int = 125
    powerup_bonus: int = 200
    hazard_defeat_bonus: int = 200
    boost_bonus: int = 25
    combo_window_ms: float = 2000.0
    combo_step_bonus: float = 0.2
    milestone_steps: tuple[int, ...] = (1000, 500, 100)

    def __post_init__(self) -> None:
        if self.height_divisor <= 0:
            raise ValueError("height_divisor must be positive")
        if self.combo_window_ms < 0:
            raise ValueError("combo_window_ms must not be negative")
        if any(step <= 0 for step in self.milestone_steps):
            raise ValueError("milestone steps must be positive")


@dataclass(frozen=True)
class PowerupDef:
    """Static description of a power-up kind."""

    duration_ms: float
    rarity: float
    flight_power: float = 0.0

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if self.rarity < 0:
            raise ValueError("rarity must not be negative")


def _default_powerups() -> dict[PowerupKind, PowerupDef]:
    return {
        PowerupKind.CORN: PowerupDef(duration_ms=3000.0, rarity=0.25, flight_power=0.4),
        PowerupKind.SHIELD: PowerupDef(duration_ms=4000.0, rarity=0.25),
        PowerupKind.MAGNET: PowerupDef(duration_ms=6000.0, rarity=0.35),
    }


@dataclass(frozen=True)
class PowerupConfig:
    kinds: dict[PowerupKind, PowerupDef] = field(default_factory=_default_powerups)
    max_active: int = 2
    warning_ms: float = 1000.0
    magnet_range: float = 80.0
    magnet_pull: float = 0.3
    defeat_bounce: float = 1.3

    def __post_init__(self) -> None:
        if self.max_active < 1:
            raise ValueError("max_active must be at least 1")
        missing = set(PowerupKind) - set(self.kinds)
        if missing:
            names = ", ".join(sorted(k.value for k in missing))
            raise ValueError(f"missing power-up definitions: {names}")
        if self.magnet_range <= 0:
            raise ValueError("magnet_range must be positive")


@dataclass(frozen=True)
class EffectsConfig:
    max_particles: int = 150
    particle_gravity_scale: float = 0.2
    particle_life: float = 60.0
    bounce_particles: int = 3
    spring_particles: dict[PlatformKind, int] = field(default_factory=lambda: {
        PlatformKind.MINISPRING: 15,
        PlatformKind.SPRING: 25,
        PlatformKind.SUPERSPRING: 35,
    })
    taco_particles: int = 8
    powerup_particles: int = 12
    hazard_particles: int = 25
    victory_particles: int = 20
    boost_particles: int = 6

    def __post_init__(self) -> None:
        if self.max_particles < 0:
            raise ValueError("max_particles must not be negative")


@dataclass(frozen=True)
class CameraConfig:
    follow_ratio: float = 0.7
    follow_speed: float = 0.1
    zoom: float = 1.0


@dataclass(frozen=True)
class DeathConfig:
    """Leniency below the camera, keyed by distance from the start.

    ``zones`` is a tuple of ``(distance_below, buffer)`` pairs checked in
    order; ``default_buffer`` applies past the last zone.
    """

    zones: tuple[tuple[float, float], ...] = ((200.0, 400.0), (500.0, 250.0))
    default_buffer: float = 100.0


@dataclass(frozen=True)
class GameConfig:
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    loop: LoopConfig = field(default_factory=LoopConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    platform: PlatformConfig = field(default_factory=PlatformConfig)
    collectibles: CollectibleConfig = field(default_factory=CollectibleConfig)
    score: ScoreConfig = field(default_factory=ScoreConfig)
    powerups: PowerupConfig = field(default_factory=PowerupConfig)
    effects: EffectsConfig = field(default_factory=EffectsConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    death: DeathConfig = field(default_factory=DeathConfig)

    def __post_init__(self) -> None:
        reach = self.player.jump_reach
        for tier in self.platform.tiers:
            if tier.max_gap > reach:
                raise ValueError(
                    f"tier {tier.name!r}: max_gap {tier.max_gap} exceeds "
                    f"single-jump reach {reach:.1f}"
                )
        if self.platform.width > self.canvas.width:
            raise ValueError("platforms must fit on the canvas")
