"""
FastAPI dependencies resolving the services owned by the running app.

``create_app`` builds one store and one instance of each service and keeps
them on ``app.state``; these providers hand them to the endpoints.
"""

from __future__ import annotations

from fastapi import Request

from .services import DataService, TodoService, UserService


# PUBLIC_INTERFACE
def get_user_service(request: Request) -> UserService:
    """Return the user service of the application serving ``request``."""
    return request.app.state.user_service


# PUBLIC_INTERFACE
def get_todo_service(request: Request) -> TodoService:
    """Return the todo service of the application serving ``request``."""
    return request.app.state.todo_service


# PUBLIC_INTERFACE
def get_data_service(request: Request) -> DataService:
    """Return the data administration service of the application serving ``request``."""
    return request.app.state.data_service
