"""Tests for the action contract and composite actions."""
from __future__ import annotations

from typing import List

import pytest

from undo_history import (
    ActionKind,
    ActionOwnershipError,
    CallbackAction,
    CompositeAction,
    History,
)


def _recording(log: List[str], name: str, **kwargs) -> CallbackAction:
    return CallbackAction(
        on_redo=lambda: log.append(f"redo {name}"),
        on_undo=lambda: log.append(f"undo {name}"),
        description=name,
        **kwargs,
    )


def test_callback_action_capabilities() -> None:
    action = _recording([], "move")

    assert action.kind is ActionKind.LEAF
    assert action.can_undo() is True
    assert action.as_composite() is None
    assert action.owner_link() is None
    assert _recording([], "save", permanent=True).can_undo() is False


def test_composite_applies_children_in_storage_order() -> None:
    log: List[str] = []
    composite = CompositeAction([_recording(log, "move"), _recording(log, "resize")])

    composite.redo()
    composite.undo()

    assert log == ["redo move", "redo resize", "undo move", "undo resize"]
    assert composite.kind is ActionKind.COMPOSITE
    assert composite.as_composite() is composite
    assert len(composite) == 2


def test_composite_reverse_undo_option() -> None:
    log: List[str] = []
    composite = CompositeAction(reverse_undo=True)
    composite.add(_recording(log, "insert x"))
    composite.add(_recording(log, "insert y"))

    composite.redo()
    composite.undo()

    assert log == ["redo insert x", "redo insert y", "undo insert y", "undo insert x"]


def test_composite_can_undo_is_conjunction() -> None:
    assert CompositeAction().can_undo() is True

    composite = CompositeAction([_recording([], "a")])
    assert composite.can_undo() is True
    composite.add(_recording([], "b", permanent=True))
    assert composite.can_undo() is False


def test_action_cannot_have_two_owners() -> None:
    child = _recording([], "a")
    first = CompositeAction([child])

    with pytest.raises(ActionOwnershipError):
        CompositeAction([child])
    with pytest.raises(ActionOwnershipError):
        History().commit(child)
    assert first.children == (child,)


def test_composite_cannot_contain_itself() -> None:
    outer = CompositeAction()
    inner = CompositeAction()
    outer.add(inner)

    with pytest.raises(ActionOwnershipError):
        outer.add(outer)
    with pytest.raises(ActionOwnershipError):
        inner.add(outer)


def test_non_actions_are_rejected() -> None:
    with pytest.raises(TypeError):
        CompositeAction().add(lambda: None)


def test_non_action_is_rejected_before_containment_check() -> None:
    composite = CompositeAction()

    with pytest.raises(TypeError):
        composite.add(object())
    assert len(composite) == 0
