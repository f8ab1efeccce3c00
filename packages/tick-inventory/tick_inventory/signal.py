"""Synchronous change signal owned by each container."""
from __future__ import annotations

from typing import Callable

Listener = Callable[[], None]


class Subscription:
    """Handle returned by :meth:`ChangeSignal.connect`.

    ``dispose()`` detaches the listener; calling it twice is a no-op. Also
    usable as a context manager for listeners scoped to a block.
    """

    def __init__(self, signal: ChangeSignal, listener: Listener) -> None:
        self._signal: ChangeSignal | None = signal
        self.listener = listener

    @property
    def active(self) -> bool:
        return self._signal is not None

    def dispose(self) -> None:
        if self._signal is None:
            return
        self._signal.disconnect(self.listener)
        self._signal = None

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc: object) -> None:
        self.dispose()


class ChangeSignal:
    """Payload-free observer list. Listeners run immediately on ``emit``."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def connect(self, listener: Listener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def disconnect(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def emit(self) -> None:
        # Iterate a copy so listeners may disconnect themselves.
        for listener in list(self._listeners):
            listener()

    def listener_count(self) -> int:
        return len(self._listeners)
