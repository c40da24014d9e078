"""Session controller for application-facing history management.

:class:`HistorySessionController` is a small service layer over a
:class:`~undo_history.history.History`.  Where the history treats undo/redo
with nothing to apply as a no-op, the controller raises, which is what UI
commands and scripts usually want.  It also tracks whether an undo/redo is
being applied so that actions triggered from inside an action callback are
not recorded into the history that is currently replaying.
"""

from __future__ import annotations

import logging
from typing import Optional

from .. import config
from ..actions import Action
from ..errors import RedoUnavailableError, UndoUnavailableError
from ..history import History
from ..link import HistoryLink

logger = logging.getLogger(f"{config.LOGGER_NAME}.session")


class SessionLink(HistoryLink):
    """Link that, like :meth:`HistorySessionController.record`, refuses new
    values while its controller is applying an undo/redo."""

    def __init__(self, controller: "HistorySessionController") -> None:
        super().__init__(controller.history)
        self._controller = controller

    def add_action(self, value) -> bool:
        if self._controller.is_restoring:
            logger.debug("ignoring value for link %d added during undo/redo", self.link_id)
            return False
        super().add_action(value)
        return True


class HistorySessionController:
    """Manage a history on behalf of application code."""

    def __init__(self, history: Optional[History] = None) -> None:
        self._history = history if history is not None else History()
        self._is_restoring = False

    @property
    def history(self) -> History:
        return self._history

    @property
    def is_restoring(self) -> bool:
        """Return whether the controller is currently applying undo/redo."""

        return self._is_restoring

    def record(self, action: Action) -> bool:
        """Commit *action* unless an undo/redo is being applied."""

        if self._is_restoring:
            logger.debug("ignoring %r recorded during undo/redo", action)
            return False
        self._history.commit(action)
        return True

    def create_link(self) -> SessionLink:
        """Return a new link bound to this session's history.

        The link honours :attr:`is_restoring` the same way :meth:`record`
        does.
        """

        return SessionLink(self)

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def undo(self) -> None:
        """Undo the latest action, raising when nothing can be undone."""

        if not self._history.can_undo():
            raise UndoUnavailableError("No undo history is available")
        self._is_restoring = True
        try:
            self._history.undo()
        finally:
            self._is_restoring = False

    def redo(self) -> None:
        """Reapply the next action, raising when there is no future."""

        if not self._history.can_redo():
            raise RedoUnavailableError("No redo history is available")
        self._is_restoring = True
        try:
            self._history.redo()
        finally:
            self._is_restoring = False
