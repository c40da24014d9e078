"""Exception hierarchy for undo_history."""


class HistoryError(RuntimeError):
    """Base class for history related failures."""


class ActionOwnershipError(HistoryError, ValueError):
    """Raised when an action is committed or grouped more than once."""


class LinkClosedError(HistoryError):
    """Raised when a closed link is asked to record a value."""


class UndoUnavailableError(HistoryError):
    """Raised when an undo operation is requested with no history."""


class RedoUnavailableError(HistoryError):
    """Raised when a redo operation is requested with no history."""
