"""In-memory state holder for the todo list."""

from __future__ import annotations

import itertools
import threading
from typing import Callable, Iterable

import structlog

from todolist.core.models import Priority, TodoItem

logger = structlog.get_logger()

Snapshot = tuple[TodoItem, ...]
Observer = Callable[[Snapshot], None]
Unsubscribe = Callable[[], None]


def _sorted(items: Iterable[TodoItem]) -> list[TodoItem]:
    # sorted() is stable, so equal priorities keep insertion order.
    return sorted(items, key=lambda item: item.priority.rank)


class TodoStore:
    """Single source of truth for one todo list screen.

    Every effective mutation replaces the internal list, keeps it sorted by
    priority and hands the new snapshot to each subscriber, in subscription
    order, before returning. Operations on items that are not present are
    no-ops and do not notify.
    """

    def __init__(self) -> None:
        self._items: list[TodoItem] = []
        self._observers: list[Observer] = []
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._items)

    def snapshot(self) -> Snapshot:
        return tuple(self._items)

    def get(self, item_id: int) -> TodoItem | None:
        index = self._index_of_id(item_id)
        if index is None:
            return None
        return self._items[index]

    def subscribe(self, observer: Observer) -> Unsubscribe:
        """Register ``observer`` and return a callable that removes it again."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    # --- Mutations ---

    def add(self, title: str, priority: Priority) -> None:
        with self._lock:
            item = TodoItem(title=title, is_completed=False, priority=priority, id=next(self._ids))
            self._items = _sorted([*self._items, item])
            logger.info("todo_added", id=item.id, priority=priority.value)
            self._publish()

    def toggle(self, item: TodoItem) -> None:
        with self._lock:
            self._toggle_at(self._index_of_value(item))

    def delete(self, item: TodoItem) -> None:
        with self._lock:
            self._delete_at(self._index_of_value(item))

    def toggle_id(self, item_id: int) -> TodoItem | None:
        with self._lock:
            return self._toggle_at(self._index_of_id(item_id))

    def delete_id(self, item_id: int) -> TodoItem | None:
        with self._lock:
            return self._delete_at(self._index_of_id(item_id))

    # --- Internals ---

    def _index_of_value(self, item: TodoItem) -> int | None:
        for index, candidate in enumerate(self._items):
            if candidate == item:
                return index
        return None

    def _index_of_id(self, item_id: int) -> int | None:
        for index, candidate in enumerate(self._items):
            if candidate.id == item_id:
                return index
        return None

    def _toggle_at(self, index: int | None) -> TodoItem | None:
        if index is None:
            logger.debug("todo_not_found", operation="toggle")
            return None
        updated = self._items[index].toggled()
        items = list(self._items)
        items[index] = updated
        self._items = _sorted(items)
        logger.info("todo_toggled", id=updated.id, completed=updated.is_completed)
        self._publish()
        return updated

    def _delete_at(self, index: int | None) -> TodoItem | None:
        if index is None:
            logger.debug("todo_not_found", operation="delete")
            return None
        removed = self._items[index]
        self._items = self._items[:index] + self._items[index + 1 :]
        logger.info("todo_deleted", id=removed.id)
        self._publish()
        return removed

    def _publish(self) -> None:
        snapshot = self.snapshot()
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception as e:
                logger.error("observer_failed", observer=repr(observer), error=str(e))
