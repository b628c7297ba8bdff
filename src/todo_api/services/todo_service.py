from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..errors import NotFoundError, ValidationError
from ..models import TodoEntity
from ..schemas import TodoCreate, TodoUpdate, as_utc
from ..store import InMemoryDataStore
from .user_service import UserService

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def is_overdue(todo: TodoEntity, now: datetime) -> bool:
    """A todo is overdue when it has a due date strictly before ``now``."""
    due = todo["due_date"]
    return due is not None and due < now


def _in_range(value: Optional[datetime], start: datetime, end: datetime) -> bool:
    return value is not None and start <= value <= end


def _by_order(items: Iterable[TodoEntity]) -> List[TodoEntity]:
    return [t.copy() for t in sorted(items, key=lambda t: t["order"])]


# PUBLIC_INTERFACE
class TodoService:
    """
    CRUD and queries over the store's todos.

    A todo can only be created for an existing user. The creator is not
    re-checked afterwards, so deleting a user leaves its todos in place.
    """

    def __init__(self, store: InMemoryDataStore, users: UserService) -> None:
        self._store = store
        self._users = users

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _find(self, todo_id: int) -> Optional[TodoEntity]:
        return next((t for t in self._store.todos if t["id"] == todo_id), None)

    def list_all(self) -> List[TodoEntity]:
        with self._store.lock:
            return _by_order(self._store.todos)

    def get_by_id(self, todo_id: int) -> Optional[TodoEntity]:
        with self._store.lock:
            todo = self._find(todo_id)
            return None if todo is None else todo.copy()

    def list_by_user(self, user_id: int) -> List[TodoEntity]:
        with self._store.lock:
            return _by_order(t for t in self._store.todos if t["created_by_user_id"] == user_id)

    def list_overdue(self) -> List[TodoEntity]:
        """Return overdue todos, earliest due date first."""
        now = self._now()
        with self._store.lock:
            overdue = [t for t in self._store.todos if is_overdue(t, now)]
            return [t.copy() for t in sorted(overdue, key=lambda t: t["due_date"])]

    def list_by_date_range(self, start: datetime, end: datetime) -> List[TodoEntity]:
        """
        Return todos whose planned date or due date lies within [start, end]
        (both ends inclusive), ordered by ``order``.
        """
        start, end = as_utc(start), as_utc(end)
        with self._store.lock:
            return _by_order(
                t
                for t in self._store.todos
                if _in_range(t["planned_date"], start, end) or _in_range(t["due_date"], start, end)
            )

    def create(self, data: TodoCreate) -> TodoEntity:
        """
        Create a todo for an existing user.

        Raises:
            ValidationError: ``created_by_user_id`` does not match any user.
        """
        with self._store.lock:
            if not self._users.exists(data.created_by_user_id):
                logger.warning("Rejected todo create: user %d does not exist", data.created_by_user_id)
                raise ValidationError(f"User with ID {data.created_by_user_id} does not exist")

            todo: TodoEntity = {
                "id": self._store.allocate_todo_id(),
                "order": data.order,
                "created_by_user_id": data.created_by_user_id,
                "created_on": self._now(),
                "description": data.description,
                "planned_date": data.planned_date,
                "due_date": data.due_date,
            }
            self._store.todos.append(todo)
            logger.info("Created todo %d for user %d", todo["id"], todo["created_by_user_id"])
            return todo.copy()

    def update(self, todo_id: int, data: TodoUpdate) -> TodoEntity:
        """
        Overwrite order, description, planned date and due date of a todo.

        Raises:
            NotFoundError: no todo has ``todo_id``.
        """
        with self._store.lock:
            todo = self._find(todo_id)
            if todo is None:
                raise NotFoundError(f"Todo with ID {todo_id} not found")

            todo["order"] = data.order
            todo["description"] = data.description
            todo["planned_date"] = data.planned_date
            todo["due_date"] = data.due_date
            logger.info("Updated todo %d", todo_id)
            return todo.copy()

    def delete(self, todo_id: int) -> bool:
        """Delete a todo. Return True if deleted, False if not found."""
        with self._store.lock:
            todo = self._find(todo_id)
            if todo is None:
                return False
            self._store.todos.remove(todo)
            logger.info("Deleted todo %d", todo_id)
            return True
