"""Unit tests for SignalBus."""
from __future__ import annotations

from ascent_signal import Signal, SignalBus, signal_name


def test_subscribe_and_flush():
    """Subscribe handler, publish signal, flush dispatches to handler."""
    bus = SignalBus()
    received = []

    def handler(name: str, data: dict) -> None:
        received.append((name, data))

    bus.subscribe(Signal.TACO_COLLECTED, handler)
    bus.publish(Signal.TACO_COLLECTED, bonus=125)
    bus.flush()

    assert received == [("taco_collected", {"bonus": 125})]


def test_enum_and_string_names_are_interchangeable():
    bus = SignalBus()
    received = []
    bus.subscribe("death", lambda n, d: received.append(n))
    bus.publish(Signal.DEATH, reason="fall")
    bus.flush()
    assert received == ["death"]


def test_nothing_dispatched_before_flush():
    bus = SignalBus()
    received = []
    bus.subscribe(Signal.DEATH, lambda n, d: received.append(n))
    bus.publish(Signal.DEATH)
    assert received == []
    assert bus.pending == 1
    bus.flush()
    assert received == ["death"]
    assert bus.pending == 0


def test_publish_without_subscribe():
    bus = SignalBus()
    bus.publish(Signal.COMBO_LOST, count=3)
    bus.flush()  # Should not raise


def test_handlers_called_in_registration_order():
    bus = SignalBus()
    order = []
    bus.subscribe(Signal.DEATH, lambda n, d: order.append("a"))
    bus.subscribe(Signal.DEATH, lambda n, d: order.append("b"))
    bus.subscribe(Signal.DEATH, lambda n, d: order.append("c"))
    bus.publish(Signal.DEATH)
    bus.flush()
    assert order == ["a", "b", "c"]


def test_unsubscribe():
    bus = SignalBus()
    received = []

    def handler(name: str, data: dict) -> None:
        received.append(name)

    bus.subscribe(Signal.DEATH, handler)
    bus.unsubscribe(Signal.DEATH, handler)
    bus.unsubscribe(Signal.DEATH, handler)  # second removal is a no-op
    bus.unsubscribe(Signal.COMBO_LOST, handler)
    bus.publish(Signal.DEATH)
    bus.flush()
    assert received == []


def test_failing_handler_is_isolated(capsys):
    """A raising handler is reported on stderr; delivery continues."""
    bus = SignalBus()
    received = []

    def broken(name: str, data: dict) -> None:
        raise RuntimeError("speaker unplugged")

    bus.subscribe(Signal.TACO_COLLECTED, broken)
    bus.subscribe(Signal.TACO_COLLECTED, lambda n, d: received.append(n))
    bus.publish(Signal.TACO_COLLECTED)
    bus.publish(Signal.TACO_COLLECTED)
    bus.flush()

    assert received == ["taco_collected", "taco_collected"]
    err = capsys.readouterr().err
    assert "ascent-signal: handler error: speaker unplugged" in err


def test_signals_published_during_flush_wait_for_next_flush():
    bus = SignalBus()
    received = []

    def chain(name: str, data: dict) -> None:
        received.append(name)
        bus.publish(Signal.COMBO_ACHIEVED)

    bus.subscribe(Signal.TACO_COLLECTED, chain)
    bus.subscribe(Signal.COMBO_ACHIEVED, lambda n, d: received.append(n))
    bus.publish(Signal.TACO_COLLECTED)
    bus.flush()
    assert received == ["taco_collected"]
    bus.flush()
    assert received == ["taco_collected", "combo_achieved"]


def test_clear_drops_queue():
    bus = SignalBus()
    received = []
    bus.subscribe(Signal.DEATH, lambda n, d: received.append(n))
    bus.publish(Signal.DEATH)
    bus.clear()
    bus.flush()
    assert received == []


def test_subscribe_all_covers_every_signal():
    bus = SignalBus()
    received = []
    bus.subscribe_all(lambda n, d: received.append(n))
    for signal in Signal:
        bus.publish(signal)
    bus.flush()
    assert received == [s.value for s in Signal]


def test_signal_name():
    assert signal_name(Signal.NEW_PERSONAL_BEST) == "new_personal_best"
    assert signal_name("custom") == "custom"
