"""Explicit reload signal shared between dashboard widgets."""

from __future__ import annotations

from typing import Callable


class RefreshSignal:
    """Callbacks registered here run when a reload is requested."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it."""

        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def trigger(self) -> int:
        """Run every subscriber in subscription order; return how many ran."""

        callbacks = list(self._callbacks)
        for callback in callbacks:
            callback()
        return len(callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)
