"""A simple multicast event that forwards its arguments to every listener."""

from __future__ import annotations

from typing import Any, Callable, List

Callback = Callable[..., Any]


class Event:
    """A list of callbacks that are all called when the event is broadcast."""

    def __init__(self) -> None:
        self._callbacks: List[Callback] = []

    def add(self, callback: Callback) -> None:
        """Register a callback; registering the same callback twice has no effect."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove(self, callback: Callback) -> None:
        """Unregister a callback; unknown callbacks are ignored."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def clear(self) -> None:
        """Unregister every callback."""
        self._callbacks.clear()

    def broadcast(self, *args: Any) -> None:
        """Call every registered callback, in registration order, with ``args``."""
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, callback: object) -> bool:
        return callback in self._callbacks