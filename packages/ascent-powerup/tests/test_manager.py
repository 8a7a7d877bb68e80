"""Tests for ascent_powerup.manager - PowerupManager."""
from __future__ import annotations

from dataclasses import replace

import pytest

from ascent.config import PowerupConfig
from ascent.entities import Player
from ascent.types import PowerupKind

from ascent_powerup.effects import APPLY, REVERT
from ascent_powerup.manager import PowerupManager
from ascent_powerup.types import PowerupPhase

CORN = PowerupKind.CORN
SHIELD = PowerupKind.SHIELD
MAGNET = PowerupKind.MAGNET


def _player() -> Player:
    return Player(x=0.0, y=0.0, width=32.0, height=32.0)


class TestActivation:
    def test_activate_applies_effect(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        assert manager.activate(SHIELD, player) == []
        assert player.has_shield
        assert manager.is_active(SHIELD)
        assert manager.active()[0].phase is PowerupPhase.ACTIVATING

    def test_corn_enables_flight(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        manager.activate(CORN, player)
        assert player.is_flying
        assert player.flight_power == 0.4
        assert player.flight_time_left == 3000.0

    def test_capacity_evicts_oldest(self) -> None:
        """A, B, C with capacity 2 leaves {B, C}; A's effect is reverted."""
        manager = PowerupManager(PowerupConfig(max_active=2))
        player = _player()
        manager.activate(CORN, player)
        manager.activate(SHIELD, player)
        evicted = manager.activate(MAGNET, player)
        assert evicted == [CORN]
        assert manager.kinds() == [SHIELD, MAGNET]
        assert not player.is_flying
        assert player.flight_power == 0.15
        assert player.has_shield and player.has_magnet

    def test_capacity_one(self) -> None:
        manager = PowerupManager(PowerupConfig(max_active=1))
        player = _player()
        manager.activate(SHIELD, player)
        assert manager.activate(MAGNET, player) == [SHIELD]
        assert not player.has_shield
        assert len(manager) == 1

    def test_reactivate_refreshes_and_moves_to_newest(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        manager.activate(SHIELD, player)
        manager.activate(MAGNET, player)
        manager.tick(1500.0, player)
        assert manager.activate(SHIELD, player) == []
        assert manager.kinds() == [MAGNET, SHIELD]
        assert manager.time_left(SHIELD) == 4000.0
        assert player.has_shield

    def test_bounded_under_random_sequences(self) -> None:
        import random

        rng = random.Random(12)
        manager = PowerupManager(PowerupConfig(max_active=2))
        player = _player()
        for _ in range(300):
            if rng.random() < 0.6:
                manager.activate(rng.choice(list(PowerupKind)), player)
            else:
                manager.tick(rng.uniform(0, 2000), player)
            assert len(manager) <= 2


class TestTimers:
    def test_first_tick_activates(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        manager.activate(MAGNET, player)
        transitions = manager.tick(16.0, player)
        assert [t.phase for t in transitions] == [PowerupPhase.ACTIVE]
        assert manager.active()[0].phase is PowerupPhase.ACTIVE

    def test_warning_fires_once(self) -> None:
        manager = PowerupManager(PowerupConfig(warning_ms=1000.0))
        player = _player()
        manager.activate(SHIELD, player)
        manager.tick(2000.0, player)
        warned = manager.tick(1200.0, player)
        assert [t.phase for t in warned] == [PowerupPhase.WARNING]
        assert manager.tick(100.0, player) == []
        assert manager.active()[0].phase is PowerupPhase.WARNING

    def test_expiry_reverts_effect(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        manager.activate(SHIELD, player)
        manager.tick(3999.0, player)
        assert player.has_shield
        transitions = manager.tick(1.0, player)
        assert transitions[-1].phase is PowerupPhase.EXPIRED
        assert transitions[-1].reason == "timeout"
        assert not player.has_shield
        assert not manager.is_active(SHIELD)

    def test_corn_syncs_flight_time(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        manager.activate(CORN, player)
        manager.tick(500.0, player)
        assert player.flight_time_left == 2500.0
        manager.tick(2500.0, player)
        assert not player.is_flying
        assert player.flight_time_left == 0.0

    def test_zero_delta_changes_nothing(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        manager.activate(CORN, player)
        assert manager.tick(0.0, player) == []
        assert manager.time_left(CORN) == 3000.0

    def test_custom_duration(self) -> None:
        base = PowerupConfig()
        kinds = dict(base.kinds)
        kinds[MAGNET] = replace(kinds[MAGNET], duration_ms=100.0)
        manager = PowerupManager(replace(base, kinds=kinds))
        player = _player()
        manager.activate(MAGNET, player)
        manager.tick(100.0, player)
        assert not manager.is_active(MAGNET)


class TestDeactivate:
    def test_deactivate_unknown_is_false(self) -> None:
        manager = PowerupManager(PowerupConfig())
        assert manager.deactivate(MAGNET, _player()) is False

    def test_clear(self) -> None:
        manager = PowerupManager(PowerupConfig())
        player = _player()
        manager.activate(CORN, player)
        manager.activate(SHIELD, player)
        manager.clear(player)
        assert manager.active() == []
        assert not player.is_flying and not player.has_shield


@pytest.mark.parametrize("table", [APPLY, REVERT])
def test_effect_tables_cover_every_kind(table) -> None:
    assert set(table) == set(PowerupKind)
