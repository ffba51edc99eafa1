"""A minimal synchronous signal with connectable slots."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any


class Signal:
    """Calls every connected slot, in connection order, when emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []
        self._block_depth = 0

    def connect(self, slot: Callable[..., Any]) -> None:
        """Connect a callable; it is called with the emitted arguments."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove the first connection of ``slot``; raise ValueError if absent."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call all connected slots unless the signal is blocked."""
        if self._block_depth:
            return
        for slot in list(self._slots):
            slot(*args)

    @contextmanager
    def blocked(self) -> Iterator[None]:
        """Suppress emission for the duration of the ``with`` block."""
        self._block_depth += 1
        try:
            yield
        finally:
            self._block_depth -= 1