"""Unit tests for ChangeSignal and Subscription."""
from __future__ import annotations

from tick_inventory import ChangeSignal


def test_connect_and_emit():
    """Connected listener is called once per emit, with no arguments."""
    signal = ChangeSignal()
    calls = []

    signal.connect(lambda: calls.append("changed"))
    signal.emit()

    assert calls == ["changed"]


def test_emit_without_listeners():
    """Emit with no listeners is a no-op (no error)."""
    signal = ChangeSignal()
    signal.emit()  # Should not raise
    assert signal.listener_count() == 0


def test_multiple_listeners_called_in_connection_order():
    signal = ChangeSignal()
    order = []

    signal.connect(lambda: order.append("a"))
    signal.connect(lambda: order.append("b"))
    signal.connect(lambda: order.append("c"))
    signal.emit()

    assert order == ["a", "b", "c"]


def test_dispose_detaches_listener():
    signal = ChangeSignal()
    calls = []

    sub = signal.connect(lambda: calls.append(1))
    assert sub.active
    sub.dispose()
    signal.emit()

    assert calls == []
    assert not sub.active


def test_dispose_twice_is_noop():
    signal = ChangeSignal()
    sub = signal.connect(lambda: None)
    sub.dispose()
    sub.dispose()  # Should not raise
    assert signal.listener_count() == 0


def test_disconnect_unknown_listener_is_noop():
    signal = ChangeSignal()
    signal.disconnect(lambda: None)  # Should not raise


def test_subscription_as_context_manager():
    signal = ChangeSignal()
    calls = []

    with signal.connect(lambda: calls.append(1)):
        signal.emit()
    signal.emit()

    assert calls == [1]


def test_listener_may_disconnect_itself_during_emit():
    signal = ChangeSignal()
    calls = []

    def once() -> None:
        calls.append("once")
        signal.disconnect(once)

    signal.connect(once)
    signal.connect(lambda: calls.append("always"))
    signal.emit()
    signal.emit()

    assert calls == ["once", "always", "always"]
