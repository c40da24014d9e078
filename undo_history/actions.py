"""Reversible action contract and the built-in action variants.

Every entry in a :class:`~undo_history.history.History` is an :class:`Action`.
Actions advertise what they are through :attr:`Action.kind` and two capability
queries, :meth:`Action.as_composite` and :meth:`Action.owner_link`, so callers
never need to downcast to find out whether an entry groups other actions or
belongs to a :class:`~undo_history.link.HistoryLink`.

Ownership is exclusive: an action is claimed once, either by the history it is
committed to or by the composite it is added to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from . import config
from .errors import ActionOwnershipError


class ActionKind(Enum):
    LEAF = "leaf"
    COMPOSITE = "composite"
    PROXY = "proxy"


@dataclass(frozen=True)
class LinkTag:
    """Identifies the link a proxy action belongs to and the value it records."""

    link_id: int
    index: int


class Action(ABC):
    """A reversible unit of change."""

    kind = ActionKind.LEAF

    @abstractmethod
    def undo(self) -> None:
        """Revert the effect of the most recent :meth:`redo`."""

    @abstractmethod
    def redo(self) -> None:
        """Apply the effect, the first time or again after an undo."""

    def can_undo(self) -> bool:
        """Return ``False`` for permanent actions."""
        return True

    def as_composite(self) -> Optional["CompositeAction"]:
        return None

    def owner_link(self) -> Optional[LinkTag]:
        return None


def _require_action(action: object) -> None:
    if not isinstance(action, Action):
        raise TypeError(f"expected an Action, got {type(action).__name__}")


def claim(action: Action, owner: object) -> None:
    """Record *owner* as the exclusive owner of *action*.

    Raises :class:`ActionOwnershipError` when the action already has one.
    """
    _require_action(action)
    current = getattr(action, "_owner", None)
    if current is not None:
        raise ActionOwnershipError(f"{action!r} is already owned by {current!r}")
    action._owner = owner


def release(action: Action) -> None:
    """Forget the owner of *action* so it can be claimed again."""
    action._owner = None


def _contains(root: Action, target: Action) -> bool:
    composite = root.as_composite()
    if composite is None:
        return False
    return any(child is target or _contains(child, target) for child in composite)


class CompositeAction(Action):
    """Groups several actions into one history entry.

    ``undo`` walks the children in storage order unless ``reverse_undo`` is
    set, in which case the last child is undone first.  ``redo`` always walks
    them in storage order.
    """

    kind = ActionKind.COMPOSITE

    def __init__(
        self,
        children: Iterable[Action] = (),
        *,
        reverse_undo: bool = config.COMPOSITE_REVERSE_UNDO,
    ) -> None:
        self._children: List[Action] = []
        self.reverse_undo = reverse_undo
        for child in children:
            self.add(child)

    @property
    def children(self) -> Tuple[Action, ...]:
        return tuple(self._children)

    def add(self, action: Action) -> None:
        """Append *action* and take ownership of it."""

        _require_action(action)
        if action is self or _contains(action, self):
            raise ActionOwnershipError("a composite action cannot contain itself")
        claim(action, self)
        self._children.append(action)

    def can_undo(self) -> bool:
        return all(child.can_undo() for child in self._children)

    def undo(self) -> None:
        children = reversed(self._children) if self.reverse_undo else self._children
        for child in children:
            child.undo()

    def redo(self) -> None:
        for child in self._children:
            child.redo()

    def as_composite(self) -> "CompositeAction":
        return self

    def __iter__(self) -> Iterator[Action]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"CompositeAction({len(self._children)} children)"


@dataclass(eq=False)
class CallbackAction(Action):
    """Leaf action backed by a pair of callables."""

    on_redo: Callable[[], None]
    on_undo: Callable[[], None]
    description: str = ""
    permanent: bool = field(default=False, kw_only=True)

    def redo(self) -> None:
        self.on_redo()

    def undo(self) -> None:
        self.on_undo()

    def can_undo(self) -> bool:
        return not self.permanent
