from __future__ import annotations

import dataclasses

import pytest

from todolist.core.models import Priority, TodoItem


def test_priority_order_follows_declaration() -> None:
    assert list(Priority) == [Priority.HIGH, Priority.MEDIUM, Priority.LOW]
    assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank


def test_priority_display() -> None:
    assert Priority.HIGH.label == "HIGH"
    assert Priority.HIGH.color == "error"
    assert Priority.MEDIUM.color == "primary"
    assert Priority.LOW.color == "on_surface"
    assert Priority("low") is Priority.LOW


def test_item_defaults_to_not_completed() -> None:
    item = TodoItem("Read book", priority=Priority.LOW)
    assert item.is_completed is False


def test_item_is_immutable() -> None:
    item = TodoItem("Read book", False, Priority.LOW)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.title = "Other"  # type: ignore[misc]


def test_structural_equality_ignores_id() -> None:
    a = TodoItem("Same", False, Priority.HIGH, id=1)
    b = TodoItem("Same", False, Priority.HIGH, id=2)
    assert a == b
    assert hash(a) == hash(b)
    assert a != TodoItem("Same", True, Priority.HIGH, id=1)
    assert a != TodoItem("Same", False, Priority.LOW, id=1)


def test_toggled_returns_flipped_copy() -> None:
    item = TodoItem("Task", False, Priority.MEDIUM, id=7)
    flipped = item.toggled()
    assert flipped.is_completed is True
    assert flipped.id == 7
    assert item.is_completed is False
