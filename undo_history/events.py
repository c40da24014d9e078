"""Synchronous publish/subscribe channel.

:class:`EventChannel` keeps listeners in an insertion-ordered mapping keyed by
an integer handle.  Delivery is synchronous and follows subscription order;
removing a listener only needs the handle returned by :meth:`subscribe`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from . import config


class EventChannel:
    """Ordered multi-subscriber callback registry."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._listeners: Dict[int, Callable[..., Any]] = {}
        self._next_handle = config.FIRST_SUBSCRIPTION_HANDLE

    def subscribe(self, listener: Callable[..., Any]) -> int:
        """Register *listener* and return the handle used to remove it."""

        if not callable(listener):
            raise TypeError("listener must be callable")
        handle = self._next_handle
        self._listeners[handle] = listener
        self._next_handle += 1
        return handle

    def unsubscribe(self, handle: int) -> None:
        """Remove the listener registered under *handle*, if any."""

        self._listeners.pop(handle, None)

    def emit(self, *args: Any) -> None:
        """Call every listener with *args* in subscription order."""

        # Snapshot so listeners may unsubscribe while being notified
        for listener in list(self._listeners.values()):
            listener(*args)

    __call__ = emit

    def check(self, *args: Any) -> bool:
        """Call listeners in order, stopping at the first falsy result.

        Returns ``False`` if any listener rejected the arguments, ``True``
        otherwise (including when there are no listeners).
        """
        for listener in list(self._listeners.values()):
            if not listener(*args):
                return False
        return True

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, handle: object) -> bool:
        return handle in self._listeners

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        return f"EventChannel({self.name!r}, listeners={len(self._listeners)})"
