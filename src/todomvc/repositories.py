from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from threading import RLock
from typing import Iterable, List, Optional

from .exceptions import TodoNotFoundError
from .models import TodoCounts, TodoEntity

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TodoRepository(ABC):
    """Abstract contract for the ordered todo collection."""

    @abstractmethod
    def add(self, title: str) -> TodoEntity:
        """Append a new, incomplete TodoEntity and return it."""

    @abstractmethod
    def get(self, todo_id: int) -> TodoEntity:
        """Return a TodoEntity by id. Raise TodoNotFoundError if missing."""

    @abstractmethod
    def toggle(self, todo_id: int) -> TodoEntity:
        """Flip the completed flag of a TodoEntity and return it."""

    @abstractmethod
    def edit(self, todo_id: int, title: str) -> TodoEntity:
        """Replace the title of a TodoEntity and return it."""

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """Remove a TodoEntity. Raise TodoNotFoundError if missing."""

    @abstractmethod
    def toggle_all(self, completed: bool) -> None:
        """Set the completed flag of every TodoEntity."""

    @abstractmethod
    def clear_completed(self) -> int:
        """Remove every completed TodoEntity and return how many were removed."""

    @abstractmethod
    def list(self, completed: Optional[bool] = None) -> List[TodoEntity]:
        """
        Return TodoEntities in creation order.
        - completed=None returns everything
        - otherwise only entries whose flag equals `completed`
        """

    @abstractmethod
    def counts(self) -> TodoCounts:
        """Return all/active/completed counts for the current contents."""


class InMemoryTodoRepository(TodoRepository):
    """
    Thread-safe in-memory repository. State lives for the life of the process.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        # dicts keep insertion order, which is the list order
        self._items: dict[int, TodoEntity] = {}
        self._next_id = 1

    def _now(self) -> datetime:
        return datetime.now()

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def _require(self, todo_id: int) -> TodoEntity:
        item = self._items.get(todo_id)
        if item is None:
            logger.warning("Todo %s not found", todo_id)
            raise TodoNotFoundError(todo_id)
        return item

    def add(self, title: str) -> TodoEntity:
        entity: TodoEntity = {
            "id": self._allocate_id(),
            "title": title,
            "completed": False,
            "created_at": self._now(),
        }
        with self._lock:
            self._items[entity["id"]] = entity
        logger.info("Added todo %s", entity["id"])
        return entity.copy()

    def get(self, todo_id: int) -> TodoEntity:
        with self._lock:
            return self._require(todo_id).copy()

    def toggle(self, todo_id: int) -> TodoEntity:
        with self._lock:
            item = self._require(todo_id)
            item["completed"] = not item["completed"]
            logger.info("Toggled todo %s to completed=%s", todo_id, item["completed"])
            return item.copy()

    def edit(self, todo_id: int, title: str) -> TodoEntity:
        with self._lock:
            item = self._require(todo_id)
            item["title"] = title
            logger.info("Edited todo %s", todo_id)
            return item.copy()

    def delete(self, todo_id: int) -> None:
        with self._lock:
            self._require(todo_id)
            del self._items[todo_id]
        logger.info("Deleted todo %s", todo_id)

    def toggle_all(self, completed: bool) -> None:
        with self._lock:
            for item in self._items.values():
                item["completed"] = completed
            logger.info("Marked %d todos completed=%s", len(self._items), completed)

    def clear_completed(self) -> int:
        with self._lock:
            doomed = [i for i, t in self._items.items() if t["completed"]]
            for todo_id in doomed:
                del self._items[todo_id]
        logger.info("Cleared %d completed todos", len(doomed))
        return len(doomed)

    def list(self, completed: Optional[bool] = None) -> List[TodoEntity]:
        with self._lock:
            items: Iterable[TodoEntity] = self._items.values()
            if completed is not None:
                items = [t for t in items if t["completed"] == completed]
            # Return copies to avoid external mutation
            return [t.copy() for t in items]

    def counts(self) -> TodoCounts:
        with self._lock:
            total = len(self._items)
            done = sum(1 for t in self._items.values() if t["completed"])
        return TodoCounts(all=total, active=total - done, completed=done)
