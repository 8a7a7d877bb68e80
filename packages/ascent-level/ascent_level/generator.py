"""Procedural platform and collectible generation.

Platforms are laid out walking upward (decreasing ``y``). Every vertical
gap is drawn from the altitude tier's range and clamped to the player's
single-jump reach, so the chain of platforms above the start is always
climbable. Hard jumps get assist springs and hazards are only placed
where the recent platforms leave a safe way around them.
"""
from __future__ import annotations

import math
import random
from typing import Sequence

from ascent.config import GameConfig, TierConfig
from ascent.entities import Collectible, Platform
from ascent.types import CollectibleKind, PlatformKind, PowerupKind

from ascent_level.rng import draw_exclusive, uniform_gap, weighted_choice

_TAU = 2 * math.pi

SPRING_KINDS = frozenset({
    PlatformKind.SPRING, PlatformKind.SUPERSPRING, PlatformKind.MINISPRING,
})
SAFE_KINDS = SPRING_KINDS | {PlatformKind.NORMAL}


class LevelGenerator:
    """Builds platforms and collectibles for one run at a time.

    The collectible frontiers (the highest y populated so far) are per-run
    state; ``reset`` clears them.
    """

    def __init__(self, config: GameConfig) -> None:
        self._config = config
        self._reach = config.player.jump_reach
        self._taco_frontier: float | None = None
        self._powerup_frontier: float | None = None

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def reach(self) -> float:
        return self._reach

    def reset(self) -> None:
        self._taco_frontier = None
        self._powerup_frontier = None

    def tier_for(self, altitude: float) -> TierConfig:
        """The last tier whose ``min_altitude`` is at or below ``altitude``."""
        chosen = self._config.platform.tiers[0]
        for tier in self._config.platform.tiers:
            if altitude >= tier.min_altitude:
                chosen = tier
        return chosen

    # -- Platforms --

    @property
    def history_size(self) -> int:
        """How many platforms below a batch ``generate_range`` looks at."""
        pc = self._config.platform
        return max(pc.evil_spacing, pc.spring_window)

    def generate_range(
        self,
        from_y: float,
        to_y: float,
        canvas_width: float,
        rng: random.Random,
        start_y: float,
        previous: Sequence[Platform] = (),
    ) -> list[Platform]:
        """Platforms from ``from_y`` up to (and just past) ``to_y``.

        ``previous`` holds the most recent platforms below ``from_y``,
        lowest first; it seeds the spring and hazard rules and the
        horizontal reach.
        """
        pc = self._config.platform
        size = self.history_size
        history: list[Platform] = list(previous)[-size:]
        out: list[Platform] = []
        y = from_y
        while y > to_y:
            altitude = start_y - y
            tier = self.tier_for(altitude)
            gap = uniform_gap(rng, tier.min_gap, tier.max_gap, self._reach)
            y -= gap
            last = history[-1] if history else None
            x = self._pick_x(rng, canvas_width, last)
            dx = abs(x - last.x) if last is not None else 0.0
            kind = self._pick_kind(rng, tier, gap, dx, altitude + gap, history, canvas_width)
            platform = Platform(x=x, y=y, width=pc.width, height=pc.height, kind=kind)
            if kind is PlatformKind.MOVING:
                platform.vx = rng.choice((-1.0, 1.0)) * pc.moving_speed
            out.append(platform)
            history.append(platform)
            if len(history) > size:
                history.pop(0)
        return out

    def _pick_kind(
        self,
        rng: random.Random,
        tier: TierConfig,
        gap: float,
        dx: float,
        altitude: float,
        history: Sequence[Platform],
        canvas_width: float,
    ) -> PlatformKind:
        """Assist springs first, then the tier's draw.

        Hard jumps (tall gap or long sideways distance) get a spring unless
        the last ``spring_window`` platforms already hold enough of them.
        Two recent EVIL platforms force a spring. A drawn EVIL that fails
        ``evil_is_safe`` becomes NORMAL.
        """
        pc = self._config.platform
        reach = self._reach
        h_reach = pc.horizontal_reach
        recent = history[-pc.spring_window:]
        springs = sum(1 for p in recent if p.kind in SPRING_KINDS)
        evil = sum(1 for p in recent if p.kind is PlatformKind.EVIL)
        very_wide = dx > pc.horizontal_superspring_ratio * h_reach

        if (gap > pc.superspring_gap_ratio * reach or very_wide) and springs == 0:
            return PlatformKind.SUPERSPRING
        if (gap > pc.assist_gap_ratio * reach or very_wide) and springs < 2:
            return PlatformKind.SPRING
        if (gap > pc.safety_gap_ratio * reach
                or dx > pc.horizontal_assist_ratio * h_reach) and springs < 1:
            return self._spring_or_mini(rng, pc.safety_spring_chance)
        if evil >= 2:
            return self._spring_or_mini(rng, pc.recovery_spring_chance)

        kind = draw_exclusive(rng, PlatformKind.NORMAL, tier.kind_chances)
        if kind is PlatformKind.EVIL and not self.evil_is_safe(rng, history, altitude, canvas_width):
            kind = PlatformKind.NORMAL
        return kind

    @staticmethod
    def _spring_or_mini(rng: random.Random, chance: float) -> PlatformKind:
        return PlatformKind.SPRING if rng.random() < chance else PlatformKind.MINISPRING

    def evil_is_safe(
        self,
        rng: random.Random,
        history: Sequence[Platform],
        altitude: float,
        canvas_width: float,
    ) -> bool:
        """Whether an EVIL platform may go on top of ``history``.

        Refused below ``evil_min_altitude``, when the last ``evil_spacing``
        platforms hold an EVIL or fewer than ``evil_min_safe`` platforms
        that bounce safely, and when the last three form a risky pattern.
        What passes still only gets through with a probability that falls
        from ``evil_base_chance`` as altitude grows.
        """
        pc = self._config.platform
        if altitude < pc.evil_min_altitude:
            return False
        recent = history[-pc.evil_spacing:]
        if any(p.kind is PlatformKind.EVIL for p in recent):
            return False
        if sum(1 for p in recent if p.kind in SAFE_KINDS) < pc.evil_min_safe:
            return False
        if self.pattern_risk(history, canvas_width):
            return False
        difficulty = min(1.0, altitude / pc.evil_falloff_altitude)
        return rng.random() <= pc.evil_base_chance - difficulty * pc.evil_chance_falloff

    def pattern_risk(self, history: Sequence[Platform], canvas_width: float) -> bool:
        """True when the last three platforms make a hazard unfair.

        Risky means at least two of them hug a canvas edge, or two of the
        sideways steps between them exceed ``risky_horizontal_gap``, or two
        of them are MOVING or BREAKING.
        """
        if len(history) < 3:
            return False
        pc = self._config.platform
        last3 = history[-3:]
        edges = sum(
            1 for p in last3
            if p.x < pc.edge_margin or p.x > canvas_width - p.width - pc.edge_margin
        )
        if edges >= 2:
            return True
        wide = sum(
            1 for a, b in zip(last3, last3[1:])
            if abs(b.x - a.x) > pc.risky_horizontal_gap
        )
        if wide >= 2:
            return True
        unstable = sum(1 for p in last3 if p.kind in (PlatformKind.MOVING, PlatformKind.BREAKING))
        return unstable >= 2

    def _pick_x(self, rng: random.Random, canvas_width: float, last: Platform | None) -> float:
        pc = self._config.platform
        lo = 0.0
        hi = max(0.0, canvas_width - pc.width)
        if last is not None:
            near_lo = max(lo, last.x - pc.horizontal_reach)
            near_hi = min(hi, last.x + pc.horizontal_reach)
            if near_lo <= near_hi:
                lo, hi = near_lo, near_hi
        return rng.uniform(lo, hi)

    def start_platform(self, world) -> Platform:
        """Extra-wide NORMAL platform right under the spawn point."""
        pc = self._config.platform
        player = world.player
        return Platform(
            x=player.x - pc.start_extra_width / 2,
            y=player.bottom + pc.start_drop,
            width=pc.width + pc.start_extra_width,
            height=pc.height,
        )

    def initial_platforms(self, world, rng: random.Random) -> list[Platform]:
        pc = self._config.platform
        start = self.start_platform(world)
        player_y = world.player.y
        rest = self.generate_range(
            player_y - pc.first_gap,
            player_y - pc.initial_height,
            world.canvas_width,
            rng,
            world.start_y,
            previous=[start],
        )
        return [start, *rest]

    # -- Collectibles --

    def make_taco(self, x: float, y: float, rng: random.Random) -> Collectible:
        size = self._config.collectibles.taco_size
        return Collectible(
            x=x, y=y, width=size, height=size,
            pulse_phase=rng.random() * _TAU,
            bob_phase=rng.random() * _TAU,
        )

    def make_powerup(
        self, x: float, y: float, kind: PowerupKind, rng: random.Random,
    ) -> Collectible:
        size = self._config.collectibles.powerup_size
        return Collectible(
            x=x, y=y, width=size, height=size,
            kind=CollectibleKind.POWERUP,
            powerup=kind,
            pulse_phase=rng.random() * _TAU,
            bob_phase=rng.random() * _TAU,
        )

    def pick_powerup(self, rng: random.Random) -> PowerupKind:
        rarities = {kind: d.rarity for kind, d in self._config.powerups.kinds.items()}
        return weighted_choice(rng, rarities)

    def initial_collectibles(self, world, rng: random.Random) -> list[Collectible]:
        cc = self._config.collectibles
        width = world.canvas_width
        out: list[Collectible] = []
        base = world.player.y

        taco_top = base
        for i in range(cc.initial_tacos):
            y = base - cc.initial_taco_offset - i * cc.taco_spacing - rng.random() * cc.taco_jitter
            out.append(self.make_taco(rng.random() * (width - cc.taco_size), y, rng))
            taco_top = min(taco_top, y)

        powerup_top = base
        for i in range(cc.initial_powerups):
            y = (base - cc.initial_powerup_offset - i * cc.powerup_spacing
                 - rng.random() * cc.powerup_jitter)
            kind = self.pick_powerup(rng)
            out.append(self.make_powerup(rng.random() * (width - cc.powerup_size), y, kind, rng))
            powerup_top = min(powerup_top, y)

        self._taco_frontier = taco_top
        self._powerup_frontier = powerup_top
        return out

    def extend_collectibles(
        self, world, rng: random.Random, generate_line: float,
    ) -> list[Collectible]:
        """Populate both frontiers up to ``generate_line``."""
        cc = self._config.collectibles
        width = world.canvas_width
        out: list[Collectible] = []

        if self._taco_frontier is None:
            self._taco_frontier = world.player.y
        while self._taco_frontier > generate_line:
            self._taco_frontier -= cc.taco_spacing + rng.random() * cc.taco_jitter
            out.append(self.make_taco(rng.random() * (width - cc.taco_size), self._taco_frontier, rng))

        if self._powerup_frontier is None:
            self._powerup_frontier = world.player.y
        while self._powerup_frontier > generate_line:
            self._powerup_frontier -= cc.powerup_spacing + rng.random() * cc.powerup_jitter
            if rng.random() < cc.powerup_spawn_chance:
                kind = self.pick_powerup(rng)
                x = rng.random() * (width - cc.powerup_size)
                out.append(self.make_powerup(x, self._powerup_frontier, kind, rng))
        return out
