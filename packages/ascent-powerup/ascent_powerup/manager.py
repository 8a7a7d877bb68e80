"""PowerupManager - bounded stack of timed power-ups."""
from __future__ import annotations

from ascent.config import PowerupConfig
from ascent.entities import Player
from ascent.types import PowerupKind

from ascent_powerup.effects import APPLY, REVERT
from ascent_powerup.types import ActivePowerup, PowerupPhase, PowerupTransition


class PowerupManager:
    """Holds at most ``max_active`` power-ups, oldest first.

    Activating past capacity evicts the oldest entry and reverts its
    effect. Timers count simulated milliseconds passed to ``tick``.
    """

    def __init__(self, config: PowerupConfig, base_flight_power: float = 0.15) -> None:
        self._config = config
        self._base_flight_power = base_flight_power
        self._active: dict[PowerupKind, ActivePowerup] = {}

    @property
    def config(self) -> PowerupConfig:
        return self._config

    # --- Activation ---

    def activate(self, kind: PowerupKind, player: Player) -> list[PowerupKind]:
        """Activate ``kind`` and apply its effect. Returns evicted kinds.

        Re-collecting an active kind refreshes its timer and makes it the
        newest entry; nothing is evicted.
        """
        defn = self._config.kinds[kind]
        evicted: list[PowerupKind] = []
        if kind in self._active:
            del self._active[kind]
        else:
            while len(self._active) >= self._config.max_active:
                oldest = next(iter(self._active))
                self.deactivate(oldest, player)
                evicted.append(oldest)
        self._active[kind] = ActivePowerup(
            kind=kind, time_left_ms=defn.duration_ms, duration_ms=defn.duration_ms,
        )
        APPLY[kind](player, defn)
        return evicted

    def deactivate(self, kind: PowerupKind, player: Player) -> bool:
        if kind not in self._active:
            return False
        del self._active[kind]
        REVERT[kind](player, self._base_flight_power)
        return True

    def clear(self, player: Player) -> None:
        for kind in list(self._active):
            self.deactivate(kind, player)

    # --- Timers ---

    def tick(self, delta_ms: float, player: Player) -> list[PowerupTransition]:
        """Count every timer down by ``delta_ms``; expire what ran out."""
        if delta_ms <= 0:
            return []
        transitions: list[PowerupTransition] = []
        for kind, entry in list(self._active.items()):
            if entry.phase is PowerupPhase.ACTIVATING:
                entry.phase = PowerupPhase.ACTIVE
                transitions.append(PowerupTransition(kind, PowerupPhase.ACTIVE,
                                                     time_left_ms=entry.time_left_ms))
            entry.time_left_ms -= delta_ms
            if entry.time_left_ms <= 0:
                entry.time_left_ms = 0.0
                entry.phase = PowerupPhase.EXPIRED
                self.deactivate(kind, player)
                transitions.append(PowerupTransition(kind, PowerupPhase.EXPIRED, "timeout"))
                continue
            if entry.time_left_ms <= self._config.warning_ms and not entry.warning_fired:
                entry.warning_fired = True
                entry.phase = PowerupPhase.WARNING
                transitions.append(PowerupTransition(kind, PowerupPhase.WARNING,
                                                     time_left_ms=entry.time_left_ms))
            if kind is PowerupKind.CORN:
                player.flight_time_left = entry.time_left_ms
        return transitions

    # --- Queries ---

    def is_active(self, kind: PowerupKind) -> bool:
        return kind in self._active

    def active(self) -> list[ActivePowerup]:
        """Active entries, oldest first."""
        return list(self._active.values())

    def kinds(self) -> list[PowerupKind]:
        return list(self._active)

    def time_left(self, kind: PowerupKind) -> float:
        entry = self._active.get(kind)
        return entry.time_left_ms if entry is not None else 0.0

    def __len__(self) -> int:
        return len(self._active)
