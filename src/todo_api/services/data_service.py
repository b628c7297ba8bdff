"""
Administrative operations over the whole data store.

``DataService`` reports the store's status, resets it to the sample data,
seeds additional sample rows and builds an aggregate summary that joins
todos to their creators.  Todos whose creator has been deleted are
reported with the creator name ``"Unknown"``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..settings import Settings
from ..store import InMemoryDataStore
from .todo_service import is_overdue

logger = logging.getLogger(__name__)

UNKNOWN_CREATOR = "Unknown"


# PUBLIC_INTERFACE
class DataService:
    """Status, reset, seeding and summary of the in-memory data store."""

    def __init__(self, store: InMemoryDataStore, settings: Settings) -> None:
        self._store = store
        self._settings = settings

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def status(self) -> Dict[str, Any]:
        with self._store.lock:
            return {
                "user_count": self._store.user_count,
                "todo_count": self._store.todo_count,
                "last_updated": self._now(),
                "message": "Data persists across requests for the lifetime of the process",
                "configuration": {
                    "initialize_sample_data": self._settings.initialize_sample_data,
                },
            }

    def reset_data(self) -> Dict[str, Any]:
        with self._store.lock:
            self._store.reset()
            logger.info("Data store reset to sample data")
            return {
                "message": "Data store has been reset to initial sample data",
                "user_count": self._store.user_count,
                "todo_count": self._store.todo_count,
                "reset_time": self._now(),
            }

    def initialize_sample_data(self) -> Dict[str, Any]:
        """Seed the sample rows again; existing data is kept."""
        with self._store.lock:
            self._store.seed_sample_data()
            return {
                "message": "Sample data has been initialized",
                "user_count": self._store.user_count,
                "todo_count": self._store.todo_count,
                "initialize_time": self._now(),
            }

    def summary(self) -> Dict[str, Any]:
        now = self._now()
        with self._store.lock:
            names = {u["id"]: u["name"] for u in self._store.users}
            counts: Dict[int, int] = {}
            for t in self._store.todos:
                counts[t["created_by_user_id"]] = counts.get(t["created_by_user_id"], 0) + 1

            users = [
                {
                    "id": u["id"],
                    "name": u["name"],
                    "email": u["email"],
                    "todo_count": counts.get(u["id"], 0),
                }
                for u in self._store.users
            ]
            todos = [
                {
                    "id": t["id"],
                    "description": t["description"],
                    "order": t["order"],
                    "created_by": names.get(t["created_by_user_id"], UNKNOWN_CREATOR),
                    "created_on": t["created_on"],
                    "planned_date": t["planned_date"],
                    "due_date": t["due_date"],
                    "is_overdue": is_overdue(t, now),
                }
                for t in self._store.todos
            ]
            return {
                "users": users,
                "todos": todos,
                "total_users": len(users),
                "total_todos": len(todos),
                "overdue_todos": sum(1 for t in todos if t["is_overdue"]),
            }
