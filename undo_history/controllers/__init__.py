"""Controller layer wrapping histories for application code."""

from ..errors import RedoUnavailableError, UndoUnavailableError
from .session import HistorySessionController, SessionLink

__all__ = [
    "HistorySessionController",
    "SessionLink",
    "UndoUnavailableError",
    "RedoUnavailableError",
]
