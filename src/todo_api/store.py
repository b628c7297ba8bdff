from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from threading import RLock
from typing import List, Tuple

from .models import TodoEntity, UserEntity
from .settings import Settings

logger = logging.getLogger(__name__)

# (name, email)
SAMPLE_USERS: Tuple[Tuple[str, str], ...] = (
    ("John Doe", "john.doe@example.com"),
    ("Jane Smith", "jane.smith@example.com"),
    ("Bob Johnson", "bob.johnson@example.com"),
)

# (order, index into SAMPLE_USERS, description, created ago, planned in, due in)
SAMPLE_TODOS: Tuple[Tuple[int, int, str, timedelta, timedelta, timedelta], ...] = (
    (1, 0, "Complete project documentation", timedelta(days=1), timedelta(days=7), timedelta(days=14)),
    (2, 1, "Review code changes", timedelta(hours=2), timedelta(days=2), timedelta(days=5)),
    (3, 0, "Set up development environment", timedelta(hours=1), timedelta(days=1), timedelta(days=3)),
)


# PUBLIC_INTERFACE
class InMemoryDataStore:
    """
    Process-local owner of the user and todo collections and their id counters.

    The store is built explicitly by the application factory and handed to
    the services; nothing else keeps a copy of its lists. ``lock`` is a single
    re-entrant lock that the services hold around every read and write, so
    the lists are never mutated while another thread iterates them.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self.users: List[UserEntity] = []
        self.todos: List[TodoEntity] = []
        self._next_user_id = 1
        self._next_todo_id = 1
        self._initialized = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "InMemoryDataStore":
        """Build a store and initialize it according to ``settings``."""
        return cls().initialize(settings.initialize_sample_data)

    @property
    def lock(self) -> RLock:
        return self._lock

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def user_count(self) -> int:
        with self._lock:
            return len(self.users)

    @property
    def todo_count(self) -> int:
        with self._lock:
            return len(self.todos)

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def allocate_user_id(self) -> int:
        with self._lock:
            i = self._next_user_id
            self._next_user_id += 1
            return i

    def allocate_todo_id(self) -> int:
        with self._lock:
            i = self._next_todo_id
            self._next_todo_id += 1
            return i

    def initialize(self, initialize_sample_data: bool) -> "InMemoryDataStore":
        """
        One-time initialization. Only the first call has an effect; it seeds
        the sample data when ``initialize_sample_data`` is true.
        """
        with self._lock:
            if self._initialized:
                return self
            self._initialized = True
            if initialize_sample_data:
                self.seed_sample_data()
            logger.info(
                "Data store initialized (sample data: %s, users: %d, todos: %d)",
                initialize_sample_data,
                len(self.users),
                len(self.todos),
            )
            return self

    def seed_sample_data(self) -> None:
        """
        Append the fixed sample users and todos. This is additive: calling it
        again adds another copy of the sample rows under fresh ids.
        """
        with self._lock:
            now = self._now()
            user_ids: List[int] = []
            for name, email in SAMPLE_USERS:
                user: UserEntity = {"id": self.allocate_user_id(), "name": name, "email": email}
                self.users.append(user)
                user_ids.append(user["id"])

            for order, user_index, description, created_ago, planned_in, due_in in SAMPLE_TODOS:
                todo: TodoEntity = {
                    "id": self.allocate_todo_id(),
                    "order": order,
                    "created_by_user_id": user_ids[user_index],
                    "created_on": now - created_ago,
                    "description": description,
                    "planned_date": now + planned_in,
                    "due_date": now + due_in,
                }
                self.todos.append(todo)
            logger.info("Seeded %d sample users and %d sample todos", len(SAMPLE_USERS), len(SAMPLE_TODOS))

    def reset(self) -> None:
        """Drop all data, restart both id counters at 1 and seed the sample data."""
        with self._lock:
            self.users.clear()
            self.todos.clear()
            self._next_user_id = 1
            self._next_todo_id = 1
            logger.info("Data store cleared")
            self.seed_sample_data()
