"""Service layer over the in-memory data store."""

from .data_service import DataService
from .todo_service import TodoService
from .user_service import UserService

__all__ = ["DataService", "TodoService", "UserService"]
