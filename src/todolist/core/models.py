"""Domain models for the Todo List."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class Priority(str, Enum):
    """Priority level for a todo item.

    Declaration order is sort order: HIGH sorts before MEDIUM before LOW.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def label(self) -> str:
        return self.name

    @property
    def color(self) -> str:
        """Theme colour role used when rendering the priority label."""
        return _COLORS[self]


_RANKS = {priority: index for index, priority in enumerate(Priority)}

_COLORS = {
    Priority.HIGH: "error",
    Priority.MEDIUM: "primary",
    Priority.LOW: "on_surface",
}


@dataclass(frozen=True)
class TodoItem:
    """A todo item.

    Equality covers title, completion state and priority only. The ``id`` is
    assigned by the owning store and lets callers target one of several
    items that are otherwise equal by value.
    """

    title: str
    is_completed: bool = False
    priority: Priority = Priority.MEDIUM
    id: int = field(default=0, compare=False)

    def toggled(self) -> TodoItem:
        return replace(self, is_completed=not self.is_completed)
