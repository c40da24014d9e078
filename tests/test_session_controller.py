"""Unit tests for the history session controller service."""

from __future__ import annotations

from typing import Dict

import pytest

from undo_history import CallbackAction, History
from undo_history.controllers import (
    HistorySessionController,
    RedoUnavailableError,
    UndoUnavailableError,
)


def _make_setter(holder: Dict[str, int], value: int) -> CallbackAction:
    previous = holder["value"]

    def apply() -> None:
        holder["value"] = value

    def revert() -> None:
        holder["value"] = previous

    return CallbackAction(on_redo=apply, on_undo=revert, description=f"set {value}")


def test_session_controller_undo_redo_roundtrip():
    holder = {"value": 1}
    controller = HistorySessionController()

    assert controller.record(_make_setter(holder, 2)) is True
    assert controller.record(_make_setter(holder, 3)) is True
    assert holder["value"] == 3

    controller.undo()
    assert holder["value"] == 2

    controller.undo()
    assert holder["value"] == 1

    controller.redo()
    assert holder["value"] == 2

    controller.redo()
    assert holder["value"] == 3


def test_session_controller_raises_without_history():
    controller = HistorySessionController(History())

    with pytest.raises(UndoUnavailableError):
        controller.undo()
    with pytest.raises(RedoUnavailableError):
        controller.redo()

    controller.record(CallbackAction(on_redo=lambda: None, on_undo=lambda: None))
    assert controller.can_undo() is True
    assert controller.can_redo() is False


def test_session_controller_ignores_records_while_restoring():
    controller = HistorySessionController()
    nested = CallbackAction(on_redo=lambda: None, on_undo=lambda: None)
    results = []

    def on_undo() -> None:
        assert controller.is_restoring is True
        results.append(controller.record(nested))

    controller.record(CallbackAction(on_redo=lambda: None, on_undo=on_undo))
    controller.undo()

    assert results == [False]
    assert controller.is_restoring is False
    assert controller.history.size == 1


def test_session_controller_creates_links():
    controller = HistorySessionController()
    link = controller.create_link()

    link.add_action("a")
    controller.undo()

    assert link.history is controller.history
    assert link.position == 0


def test_session_link_ignores_values_while_restoring():
    controller = HistorySessionController()
    link = controller.create_link()
    results = []

    def on_undo() -> None:
        results.append(link.add_action("nested"))

    first = CallbackAction(on_redo=lambda: None, on_undo=on_undo)
    assert link.add_action("a") is True
    controller.record(first)
    controller.undo()

    assert results == [False]
    assert controller.history.size == 2
    assert controller.history.action_at(1) is first
    assert link.values == ("a",)
    assert link.position == 1
