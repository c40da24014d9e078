"""Linear undo/redo history.

:class:`History` stores committed actions in commit order together with a
cursor.  Actions before the cursor are *past* (applied) and actions at or
after it are *future* (undone, kept until the next commit truncates them).

``undo`` and ``redo`` move the cursor before calling into the action, so an
action callback that inspects :attr:`History.position` sees the value after
the transition.  :class:`~undo_history.link.HistoryLink` relies on this.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from . import config
from .actions import Action, claim, release
from .events import EventChannel

logger = logging.getLogger(f"{config.LOGGER_NAME}.history")


def _unroll(actions: Iterable[Action]) -> Iterator[Action]:
    for action in actions:
        composite = action.as_composite()
        if composite is None:
            yield action
        else:
            yield from composite


class History:
    """Undo/redo stack with a movable cursor.

    Two channels announce changes:

    ``committing``
        Fired with the incoming action before the history truncates its
        future and stores it.  Listeners observe only; return values are
        ignored and the object passed is the one that gets stored.
    ``future_cleared``
        Fired without arguments after future actions have been discarded.
    """

    def __init__(self) -> None:
        self._actions: List[Action] = []
        self._position = 0
        self.committing = EventChannel("committing")
        self.future_cleared = EventChannel("future_cleared")

    @property
    def position(self) -> int:
        return self._position

    @property
    def size(self) -> int:
        return len(self._actions)

    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def action_at(self, index: int) -> Action:
        """Return the top-level action stored at *index*."""

        if not 0 <= index < len(self._actions):
            raise IndexError(f"action index {index} out of range [0, {len(self._actions)})")
        return self._actions[index]

    def commit(self, action: Action) -> None:
        """Discard the future, append *action* and apply it."""

        claim(action, self)
        try:
            self.committing.emit(action)
        except Exception:
            # Never stored; drop the claim
            release(action)
            raise
        self.clear_future()
        self._actions.append(action)
        logger.debug("commit %r at index %d", action, len(self._actions) - 1)
        self.redo()

    def clear_future(self) -> None:
        """Throw away every action at or after the cursor."""

        dropped = len(self._actions) - self._position
        while len(self._actions) > self._position:
            self._actions.pop()
        if dropped:
            logger.debug("cleared %d future action(s)", dropped)
        self.future_cleared.emit()

    def can_undo(self) -> bool:
        return self._position > 0 and self._actions[self._position - 1].can_undo()

    def can_redo(self) -> bool:
        return self._position < len(self._actions)

    def undo(self) -> bool:
        """Undo the action before the cursor.

        Returns:
            True if an action was undone, False if nothing could be undone
        """
        if not self.can_undo():
            return False
        self._position -= 1
        action = self._actions[self._position]
        logger.debug("undo %r, position now %d", action, self._position)
        action.undo()
        return True

    def redo(self) -> bool:
        """Redo the action after the cursor.

        Returns:
            True if an action was redone, False if there is no future
        """
        if not self.can_redo():
            return False
        self._position += 1
        action = self._actions[self._position - 1]
        logger.debug("redo %r, position now %d", action, self._position)
        action.redo()
        return True

    def iter_actions(self) -> Iterator[Action]:
        """Yield every action, composite entries replaced by their children."""
        return _unroll(self._actions)

    def iter_past(self) -> Iterator[Action]:
        return _unroll(self._actions[: self._position])

    def iter_future(self) -> Iterator[Action]:
        return _unroll(self._actions[self._position :])

    def undo_description(self) -> Optional[str]:
        """Get description of next action to undo."""
        if self._position > 0:
            return getattr(self._actions[self._position - 1], "description", None)
        return None

    def redo_description(self) -> Optional[str]:
        """Get description of next action to redo."""
        if self.can_redo():
            return getattr(self._actions[self._position], "description", None)
        return None

    def __repr__(self) -> str:
        return f"History(position={self._position}, size={len(self._actions)})"
