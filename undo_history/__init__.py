"""Linear undo/redo history with linked auxiliary value lists."""

from .actions import Action, ActionKind, CallbackAction, CompositeAction, LinkTag
from .controllers import HistorySessionController, SessionLink
from .errors import (
    ActionOwnershipError,
    HistoryError,
    LinkClosedError,
    RedoUnavailableError,
    UndoUnavailableError,
)
from .events import EventChannel
from .history import History
from .link import HistoryLink, ProxyAction

__all__ = [
    "Action",
    "ActionKind",
    "ActionOwnershipError",
    "CallbackAction",
    "CompositeAction",
    "EventChannel",
    "History",
    "HistoryError",
    "HistoryLink",
    "HistorySessionController",
    "LinkClosedError",
    "LinkTag",
    "ProxyAction",
    "RedoUnavailableError",
    "SessionLink",
    "UndoUnavailableError",
]
