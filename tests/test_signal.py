import pytest

from huepicker.signal import Signal


def test_emit_calls_slots_in_order_with_arguments():
    signal = Signal()
    calls = []
    signal.connect(lambda *a: calls.append(("first", a)))
    signal.connect(lambda *a: calls.append(("second", a)))
    signal.emit(1, "x")
    assert calls == [("first", (1, "x")), ("second", (1, "x"))]


def test_disconnect_stops_delivery():
    signal = Signal()
    received = []

    def slot(value):
        received.append(value)

    signal.connect(slot)
    signal.emit(1)
    assert received == [1]

    signal.disconnect(slot)
    signal.emit(2)
    assert received == [1]

    with pytest.raises(ValueError):
        signal.disconnect(slot)


def test_disconnect_unknown_slot_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_blocked_suppresses_and_restores():
    signal = Signal()
    calls = []
    signal.connect(calls.append)
    with signal.blocked():
        signal.emit("hidden")
        with signal.blocked():
            signal.emit("hidden too")
        signal.emit("still hidden")
    signal.emit("seen")
    assert calls == ["seen"]


def test_blocked_restores_after_exception():
    signal = Signal()
    calls = []
    signal.connect(calls.append)
    with pytest.raises(RuntimeError):
        with signal.blocked():
            raise RuntimeError("boom")
    signal.emit("after")
    assert calls == ["after"]