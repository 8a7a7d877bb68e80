"""ascent-signal - In-process audio/telemetry event bus."""
from __future__ import annotations

from ascent_signal.bus import SignalBus
from ascent_signal.signals import Signal, signal_name
from ascent_signal.systems import make_signal_system

__all__ = ["SignalBus", "Signal", "signal_name", "make_signal_system"]
