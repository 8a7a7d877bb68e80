"""Tests for platform and collectible generation."""
from __future__ import annotations

import random

import pytest

from ascent.config import GameConfig, PlatformConfig, TierConfig
from ascent.entities import Platform
from ascent.types import CollectibleKind, PlatformKind, PowerupKind
from ascent.world import World

from ascent_level.generator import SAFE_KINDS, SPRING_KINDS, LevelGenerator


def _easy_only() -> GameConfig:
    easy = TierConfig("easy", 0.0, 15.0, 30.0, {PlatformKind.MINISPRING: 0.2})
    return GameConfig(platform=PlatformConfig(tiers=(easy,)))


def _plain(min_gap: float, max_gap: float, **platform) -> GameConfig:
    """Single tier with no drawn kinds: anything but NORMAL is an assist."""
    tier = TierConfig("plain", 0.0, min_gap, max_gap)
    return GameConfig(platform=PlatformConfig(tiers=(tier,), **platform))


def _at(x: float, kind: PlatformKind = PlatformKind.NORMAL, y: float = 0.0) -> Platform:
    return Platform(x, y, 60, 12, kind)


def _springs_before(chain, i: int, window: int = 3) -> int:
    return sum(1 for p in chain[max(0, i - window):i] if p.kind in SPRING_KINDS)


class _FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def _gaps(platforms):
    ys = [p.y for p in platforms]
    return [a - b for a, b in zip(ys, ys[1:])]


class TestGenerateRange:
    def test_easy_band(self):
        """0 to -1000 in the easy tier: gaps in [15, 30], x on the canvas."""
        gen = LevelGenerator(_easy_only())
        platforms = gen.generate_range(0, -1000, 320, random.Random(11), start_y=0)
        assert platforms
        assert platforms[0].y <= -15
        for gap in _gaps(platforms):
            assert 15 <= gap <= 30
        for p in platforms:
            assert 0 <= p.x <= 260
        assert platforms[-1].y <= -1000
        assert platforms[-2].y > -1000

    @pytest.mark.parametrize("seed", range(20))
    def test_reachable_through_every_tier(self, seed):
        config = GameConfig()
        gen = LevelGenerator(config)
        platforms = gen.generate_range(330, -6000, 320, random.Random(seed), start_y=330)
        for gap in _gaps(platforms):
            assert 0 < gap <= config.player.jump_reach

    def test_tier_gaps_follow_altitude(self):
        gen = LevelGenerator(GameConfig())
        platforms = gen.generate_range(0, -5000, 320, random.Random(3), start_y=0)
        previous_y = 0.0
        for p in platforms:
            tier = gen.tier_for(-previous_y)
            assert tier.min_gap <= previous_y - p.y <= tier.max_gap
            previous_y = p.y

    def test_easy_tier_has_no_hazards(self):
        gen = LevelGenerator(GameConfig())
        platforms = gen.generate_range(0, -390, 320, random.Random(8), start_y=0)
        kinds = {p.kind for p in platforms}
        assert kinds <= SAFE_KINDS

    @pytest.mark.parametrize("seed", range(10))
    def test_evil_spacing(self, seed):
        evil_heavy = TierConfig("evil", 0.0, 20.0, 40.0, {PlatformKind.EVIL: 0.9})
        config = GameConfig(platform=PlatformConfig(tiers=(evil_heavy,)))
        gen = LevelGenerator(config)
        platforms = gen.generate_range(0, -4000, 320, random.Random(seed), start_y=0)
        evil_idx = [i for i, p in enumerate(platforms) if p.kind is PlatformKind.EVIL]
        assert evil_idx
        for a, b in zip(evil_idx, evil_idx[1:]):
            assert b - a > config.platform.evil_spacing

    def test_evil_spacing_honors_previous_batch(self):
        evil_heavy = TierConfig("evil", 0.0, 20.0, 40.0, {PlatformKind.EVIL: 1.0})
        gen = LevelGenerator(GameConfig(platform=PlatformConfig(
            tiers=(evil_heavy,), evil_min_altitude=0.0)))
        previous = [Platform(100, 10, 60, 12, PlatformKind.EVIL)]
        platforms = gen.generate_range(0, -90, 320, random.Random(1), start_y=0, previous=previous)
        assert all(p.kind is not PlatformKind.EVIL for p in platforms[:4])

    def test_moving_platforms_get_speed(self):
        moving = TierConfig("moving", 0.0, 20.0, 30.0, {PlatformKind.MOVING: 1.0})
        gen = LevelGenerator(GameConfig(platform=PlatformConfig(tiers=(moving,))))
        platforms = gen.generate_range(0, -300, 320, random.Random(2), start_y=0)
        assert all(abs(p.vx) == 2.0 for p in platforms)

    def test_horizontal_reach(self):
        config = GameConfig()
        gen = LevelGenerator(config)
        platforms = gen.generate_range(0, -3000, 320, random.Random(9), start_y=0)
        for a, b in zip(platforms, platforms[1:]):
            assert abs(a.x - b.x) <= config.platform.horizontal_reach

    def test_deterministic_for_seed(self):
        gen = LevelGenerator(GameConfig())
        a = gen.generate_range(0, -2000, 320, random.Random(42), start_y=0)
        b = gen.generate_range(0, -2000, 320, random.Random(42), start_y=0)
        assert a == b

    def test_empty_when_range_is_inverted(self):
        gen = LevelGenerator(GameConfig())
        assert gen.generate_range(-100, 0, 320, random.Random(0), start_y=0) == []


class TestAssistSprings:
    @pytest.mark.parametrize("seed", range(10))
    def test_sideways_jumps_get_springs(self, seed):
        config = _plain(15.0, 30.0)
        pc = config.platform
        very_wide = pc.horizontal_superspring_ratio * pc.horizontal_reach
        wide = pc.horizontal_assist_ratio * pc.horizontal_reach
        start = _at(130.0)
        platforms = LevelGenerator(config).generate_range(
            0, -3000, 320, random.Random(seed), start_y=0, previous=[start])
        chain = [start, *platforms]
        for i in range(1, len(chain)):
            kind = chain[i].kind
            dx = abs(chain[i].x - chain[i - 1].x)
            springs = _springs_before(chain, i)
            if dx > very_wide and springs == 0:
                assert kind is PlatformKind.SUPERSPRING
            elif dx > very_wide and springs < 2:
                assert kind is PlatformKind.SPRING
            elif dx > wide and springs < 1:
                assert kind in (PlatformKind.SPRING, PlatformKind.MINISPRING)
            else:
                assert kind is PlatformKind.NORMAL

    def test_sideways_promotion_happens(self):
        gen = LevelGenerator(_plain(15.0, 30.0))
        kinds = [
            p.kind
            for seed in range(5)
            for p in gen.generate_range(0, -3000, 320, random.Random(seed), start_y=0)
        ]
        assert PlatformKind.SUPERSPRING in kinds
        assert PlatformKind.SPRING in kinds

    @pytest.mark.parametrize("seed", range(10))
    def test_tall_gaps_get_springs(self, seed):
        # Reach wider than the canvas: only the vertical rules can fire.
        config = _plain(150.0, 250.0, horizontal_reach=1000.0)
        pc = config.platform
        reach = config.player.jump_reach
        start = _at(130.0)
        platforms = LevelGenerator(config).generate_range(
            0, -6000, 320, random.Random(seed), start_y=0, previous=[start])
        chain = [start, *platforms]
        for i in range(1, len(chain)):
            kind = chain[i].kind
            gap = chain[i - 1].y - chain[i].y
            springs = _springs_before(chain, i)
            if gap > pc.superspring_gap_ratio * reach and springs == 0:
                assert kind is PlatformKind.SUPERSPRING
            elif gap > pc.assist_gap_ratio * reach and springs < 2:
                assert kind is PlatformKind.SPRING
            elif gap > pc.safety_gap_ratio * reach and springs < 1:
                assert kind in (PlatformKind.SPRING, PlatformKind.MINISPRING)
            else:
                assert kind is PlatformKind.NORMAL

    @pytest.mark.parametrize("seed", range(10))
    def test_assist_springs_never_cluster(self, seed):
        """Every gap calls for help, yet no three springs come in a row."""
        gen = LevelGenerator(_plain(220.0, 250.0))
        platforms = gen.generate_range(0, -5000, 320, random.Random(seed), start_y=0)
        springy = [p.kind in SPRING_KINDS for p in platforms]
        assert any(springy)
        for window in zip(springy, springy[1:], springy[2:]):
            assert not all(window)

    @pytest.mark.parametrize("seed", range(10))
    def test_two_recent_evil_force_a_spring(self, seed):
        gen = LevelGenerator(_plain(15.0, 30.0))
        previous = [_at(130.0, PlatformKind.EVIL, 40.0), _at(130.0, PlatformKind.EVIL, 20.0)]
        platforms = gen.generate_range(
            0, -20, 320, random.Random(seed), start_y=0, previous=previous)
        assert platforms[0].kind in (PlatformKind.SPRING, PlatformKind.MINISPRING)

    def test_history_size_covers_both_windows(self):
        gen = LevelGenerator(GameConfig(platform=PlatformConfig(spring_window=7)))
        assert gen.history_size == 7
        assert LevelGenerator(GameConfig()).history_size == 5


class TestEvilGate:
    CALM = (_at(120.0), _at(140.0), _at(130.0))

    def test_calm_history_passes(self):
        gen = LevelGenerator(GameConfig())
        assert gen.evil_is_safe(_FixedRandom(0.0), self.CALM, 1000.0, 320)

    def test_refused_below_min_altitude(self):
        gen = LevelGenerator(GameConfig())
        assert not gen.evil_is_safe(_FixedRandom(0.0), self.CALM, 799.0, 320)

    @pytest.mark.parametrize("seed", range(10))
    def test_no_evil_generated_low(self, seed):
        evil_heavy = TierConfig("evil", 0.0, 20.0, 40.0, {PlatformKind.EVIL: 0.9})
        gen = LevelGenerator(GameConfig(platform=PlatformConfig(tiers=(evil_heavy,))))
        platforms = gen.generate_range(0, -700, 320, random.Random(seed), start_y=0)
        assert all(p.kind is not PlatformKind.EVIL for p in platforms)

    def test_refused_with_evil_in_last_five(self):
        gen = LevelGenerator(GameConfig())
        history = [_at(120.0, PlatformKind.EVIL), *self.CALM]
        assert not gen.evil_is_safe(_FixedRandom(0.0), history, 1000.0, 320)
        older = [_at(120.0, PlatformKind.EVIL), *self.CALM, _at(125.0), _at(135.0)]
        assert gen.evil_is_safe(_FixedRandom(0.0), older, 1000.0, 320)

    def test_needs_two_safe_platforms(self):
        gen = LevelGenerator(GameConfig())
        history = [_at(120.0, PlatformKind.CLOUD), _at(140.0, PlatformKind.CLOUD), _at(130.0)]
        assert not gen.evil_is_safe(_FixedRandom(0.0), history, 1000.0, 320)

    def test_refused_on_risky_pattern(self):
        gen = LevelGenerator(GameConfig())
        history = [_at(10.0), _at(20.0), _at(130.0)]
        assert not gen.evil_is_safe(_FixedRandom(0.0), history, 1000.0, 320)

    def test_chance_falls_with_altitude(self):
        gen = LevelGenerator(GameConfig())
        # below 0.67 passes at 1000, below 0.4 from 10000 up
        assert gen.evil_is_safe(_FixedRandom(0.6), self.CALM, 1000.0, 320)
        assert not gen.evil_is_safe(_FixedRandom(0.69), self.CALM, 1000.0, 320)
        assert not gen.evil_is_safe(_FixedRandom(0.6), self.CALM, 10000.0, 320)
        assert gen.evil_is_safe(_FixedRandom(0.39), self.CALM, 20000.0, 320)

    def test_seeded_pass_rate(self):
        gen = LevelGenerator(GameConfig())
        rng = random.Random(7)
        passed = sum(gen.evil_is_safe(rng, self.CALM, 1000.0, 320) for _ in range(4000))
        assert passed / 4000 == pytest.approx(0.67, abs=0.03)


class TestPatternRisk:
    @pytest.mark.parametrize("history, risky", [
        ([_at(120.0), _at(140.0), _at(130.0)], False),
        ([_at(10.0), _at(20.0), _at(130.0)], True),
        ([_at(130.0), _at(210.0), _at(140.0)], False),
        ([_at(70.0), _at(180.0), _at(70.0)], True),
        ([_at(120.0, PlatformKind.MOVING), _at(140.0, PlatformKind.BREAKING), _at(130.0)], True),
        ([_at(120.0, PlatformKind.MOVING), _at(140.0), _at(130.0)], False),
        ([_at(10.0), _at(250.0)], False),
    ], ids=["calm", "edges", "one-edge", "wide-steps", "unstable", "one-unstable", "short"])
    def test_pattern(self, history, risky):
        gen = LevelGenerator(GameConfig())
        assert gen.pattern_risk(history, 320) is risky

    def test_only_last_three_count(self):
        gen = LevelGenerator(GameConfig())
        history = [_at(10.0), _at(20.0), _at(120.0), _at(140.0), _at(130.0)]
        assert gen.pattern_risk(history, 320) is False


class TestInitialLevel:
    def test_start_platform_under_player(self):
        config = GameConfig()
        world = World(config)
        gen = LevelGenerator(config)
        platforms = gen.initial_platforms(world, random.Random(1))
        start = platforms[0]
        assert start.width == 180
        assert start.y == world.player.bottom + 10
        assert start.x <= world.player.x
        assert start.x + start.width >= world.player.x + world.player.width
        assert start.kind is PlatformKind.NORMAL

    @pytest.mark.parametrize("seed", range(10))
    def test_initial_chain_reachable(self, seed):
        config = GameConfig()
        world = World(config)
        gen = LevelGenerator(config)
        platforms = gen.initial_platforms(world, random.Random(seed))
        for gap in _gaps(platforms):
            assert 0 < gap <= config.player.jump_reach
        assert platforms[-1].y <= world.player.y - 2000

    def test_initial_collectibles(self):
        config = GameConfig()
        world = World(config)
        gen = LevelGenerator(config)
        items = gen.initial_collectibles(world, random.Random(1))
        tacos = [c for c in items if c.kind is CollectibleKind.TACO]
        powerups = [c for c in items if c.kind is CollectibleKind.POWERUP]
        assert len(tacos) == 15
        assert len(powerups) == 3
        assert all(isinstance(p.powerup, PowerupKind) for p in powerups)
        assert all(t.y <= world.player.y - 200 for t in tacos)
        assert all(p.y <= world.player.y - 600 for p in powerups)


class TestExtendCollectibles:
    def test_fills_up_to_line(self):
        config = GameConfig()
        world = World(config)
        gen = LevelGenerator(config)
        gen.initial_collectibles(world, random.Random(1))
        items = gen.extend_collectibles(world, random.Random(2), -8000)
        tacos = [c for c in items if c.kind is CollectibleKind.TACO]
        assert tacos
        assert min(t.y for t in tacos) <= -8000
        ys = sorted((t.y for t in tacos), reverse=True)
        for a, b in zip(ys, ys[1:]):
            assert 150 <= a - b <= 250

    def test_no_work_below_frontier(self):
        config = GameConfig()
        world = World(config)
        gen = LevelGenerator(config)
        gen.extend_collectibles(world, random.Random(2), -3000)
        assert gen.extend_collectibles(world, random.Random(3), -2000) == []

    def test_reset_clears_frontiers(self):
        config = GameConfig()
        world = World(config)
        gen = LevelGenerator(config)
        gen.extend_collectibles(world, random.Random(2), -3000)
        gen.reset()
        assert gen.extend_collectibles(world, random.Random(3), -2000)
