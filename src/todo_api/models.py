from __future__ import annotations

from datetime import datetime
from typing import Optional, TypedDict


# PUBLIC_INTERFACE
class UserEntity(TypedDict):
    """
    A user as held by the in-memory store.

    Fields:
    - id: Unique integer identifier assigned by the store
    - name: Display name
    - email: Email address, unique across users (case-insensitive)
    """

    id: int
    name: str
    email: str


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A todo item as held by the in-memory store.

    Fields:
    - id: Unique integer identifier assigned by the store
    - order: Sort position used by list endpoints (not unique)
    - created_by_user_id: Id of the user that created the todo
    - created_on: UTC creation timestamp, set once
    - description: Text of the todo (1..500 chars)
    - planned_date: Optional UTC datetime the work is planned for
    - due_date: Optional UTC deadline; overdue once it is in the past
    """

    id: int
    order: int
    created_by_user_id: int
    created_on: datetime
    description: str
    planned_date: Optional[datetime]
    due_date: Optional[datetime]
