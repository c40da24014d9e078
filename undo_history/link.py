"""Auxiliary value lists kept in step with a shared :class:`History`.

A :class:`HistoryLink` stores caller-owned values.  Every value is recorded by
committing a :class:`ProxyAction` into the history, tagged with the value's
index.  The link never watches individual undo/redo calls on the history;
instead it recovers its cursor with :meth:`HistoryLink.sync`, which scans the
history's past backwards for the closest proxy belonging to the link.  That
keeps the link correct when unrelated actions, or other links' proxies, are
interleaved with its own.

Proxies hold the link weakly.  Once the link is closed or garbage collected,
its proxies stay in the history as inert entries.
"""

from __future__ import annotations

import itertools
import logging
import weakref
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from . import config
from .actions import Action, ActionKind, LinkTag
from .errors import LinkClosedError
from .history import History

logger = logging.getLogger(f"{config.LOGGER_NAME}.link")

T = TypeVar("T")

_link_ids = itertools.count(1)


class ProxyAction(Action):
    """History entry recording that a link's value at ``index`` is applied."""

    kind = ActionKind.PROXY

    def __init__(self, link: "HistoryLink", index: int) -> None:
        self._link = weakref.ref(link)
        self._tag = LinkTag(link.link_id, index)

    @property
    def index(self) -> int:
        return self._tag.index

    def owner_link(self) -> LinkTag:
        return self._tag

    def resolve(self) -> Optional["HistoryLink"]:
        """Return the owning link, or ``None`` once it is gone or closed."""

        link = self._link()
        if link is None or link.closed:
            return None
        return link

    def undo(self) -> None:
        link = self.resolve()
        if link is None:
            logger.debug("link %d is gone; ignoring undo", self._tag.link_id)
            return
        link.sync()

    def redo(self) -> None:
        link = self.resolve()
        if link is None:
            logger.debug("link %d is gone; ignoring redo", self._tag.link_id)
            return
        link._position = self._tag.index + 1

    def __repr__(self) -> str:
        return f"ProxyAction(link={self._tag.link_id}, index={self._tag.index})"


def _forward_future_cleared(method_ref: weakref.WeakMethod) -> None:
    method = method_ref()
    if method is not None:
        method()


class HistoryLink(Generic[T]):
    """Value list whose cursor follows a shared :class:`History`.

    Values at index ``< position`` correspond to proxies in the history's
    past; values at or after it correspond to undone proxies and are dropped
    once the history truncates its future.
    """

    def __init__(self, history: History) -> None:
        self.link_id = next(_link_ids)
        self._history = history
        self._values: List[T] = []
        self._position = 0
        self._closed = False

        method_ref = weakref.WeakMethod(self._on_future_cleared)
        handle = history.future_cleared.subscribe(
            lambda: _forward_future_cleared(method_ref)
        )
        self._finalizer = weakref.finalize(
            self, history.future_cleared.unsubscribe, handle
        )
        logger.debug("link %d bound to %r", self.link_id, history)

    @property
    def history(self) -> History:
        return self._history

    @property
    def position(self) -> int:
        return self._position

    @property
    def values(self) -> Tuple[T, ...]:
        return tuple(self._values)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def current(self) -> Optional[T]:
        """Most recently applied value, or ``None`` when the past is empty."""
        if self._position == 0:
            return None
        return self._values[self._position - 1]

    def __len__(self) -> int:
        return len(self._values)

    def value_at(self, index: int) -> T:
        if not 0 <= index < len(self._values):
            raise IndexError(f"value index {index} out of range [0, {len(self._values)})")
        return self._values[index]

    def add_action(self, value: T) -> None:
        """Record *value* as a new step in the shared history."""

        if self._closed:
            raise LinkClosedError(f"link {self.link_id} is closed")
        self._clear_future()
        proxy = ProxyAction(self, len(self._values))
        self._history.commit(proxy)
        self._values.append(value)
        self._position = len(self._values)

    def sync(self) -> None:
        """Recompute :attr:`position` from the history's past.

        Scans backwards from just before the history cursor and stops at the
        first proxy owned by this link; with none in the past the position
        resets to zero.
        """
        for index in range(self._history.position - 1, -1, -1):
            tag = self._history.action_at(index).owner_link()
            if tag is not None and tag.link_id == self.link_id:
                self._position = tag.index + 1
                break
        else:
            self._position = 0
        logger.debug("link %d synced to position %d", self.link_id, self._position)

    def _clear_future(self) -> None:
        while len(self._values) > self._position:
            self._values.pop()

    def _on_future_cleared(self) -> None:
        self.sync()
        self._clear_future()

    def close(self) -> None:
        """Stop following the history.  Safe to call more than once."""

        if self._closed:
            return
        self._closed = True
        self._finalizer()
        logger.debug("link %d closed", self.link_id)

    def __enter__(self) -> "HistoryLink[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def iter_values(self) -> Iterator[T]:
        return iter(self._values)

    def iter_past(self) -> Iterator[T]:
        for index in range(self._position):
            yield self._values[index]

    def iter_future(self) -> Iterator[T]:
        for index in range(self._position, len(self._values)):
            yield self._values[index]

    def __repr__(self) -> str:
        return (
            f"HistoryLink(id={self.link_id}, position={self._position}, "
            f"size={len(self._values)})"
        )
