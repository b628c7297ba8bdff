from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Incoming timestamps can be a date, datetime, or ISO8601 string
DateTimeInput = Union[date, datetime, str]

DESCRIPTION_MAX_LENGTH = 500


# PUBLIC_INTERFACE
def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_datetime(value: Optional[DateTimeInput]) -> Optional[datetime]:
    """
    Normalize timestamp input into an aware UTC datetime.
    - Strings are parsed via datetime.fromisoformat; date-only strings become 00:00.
    - A date (not datetime) is promoted to a datetime at midnight.
    - Naive datetimes are interpreted as UTC.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return as_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, str):
        s = value.strip()
        try:
            return as_utc(datetime.fromisoformat(s))
        except ValueError:
            try:
                d = date.fromisoformat(s)
            except ValueError as e:
                raise ValueError(
                    "Invalid date format. Use ISO8601 date or datetime string (e.g., '2025-01-31' or '2025-01-31T13:45:00Z')."
                ) from e
            return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)

    raise ValueError("Invalid type for date; expected date, datetime, or ISO8601 string.")


def _require_text(value: str, field_name: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value.strip()


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


# PUBLIC_INTERFACE
class UserCreate(ApiModel):
    """
    Schema for creating a new user.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Ann Lee", "email": "ann.lee@example.com"}}
    )

    name: str = Field(..., description="Display name of the user", min_length=1)
    email: str = Field(..., description="Email address, unique across users", min_length=1)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text(v, "name")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _require_text(v, "email")


# PUBLIC_INTERFACE
class UserUpdate(UserCreate):
    """
    Schema for replacing the name and email of an existing user.
    """


# PUBLIC_INTERFACE
class UserOut(ApiModel):
    """
    Schema returned by the API for a user.
    """

    id: int = Field(..., description="Unique identifier of the user")
    name: str = Field(..., description="Display name of the user")
    email: str = Field(..., description="Email address of the user")


# ---------------------------------------------------------------------------
# Todos
# ---------------------------------------------------------------------------


class _TodoFields(ApiModel):
    order: int = Field(..., description="Sort position of the todo")
    description: str = Field(
        ...,
        description="Text of the todo item",
        min_length=1,
        max_length=DESCRIPTION_MAX_LENGTH,
    )
    planned_date: Optional[datetime] = Field(
        default=None,
        description="Date/time the work is planned for. Accepts ISO8601 date or datetime; dates are set to 00:00 UTC",
    )
    due_date: Optional[datetime] = Field(
        default=None,
        description="Deadline of the todo. Accepts ISO8601 date or datetime; dates are set to 00:00 UTC",
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """
        Reject blank descriptions; the 500 character limit is enforced by the field.
        """
        if not v.strip():
            raise ValueError("description is required")
        return v

    @field_validator("planned_date", "due_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Optional[DateTimeInput]) -> Optional[datetime]:
        """
        Normalize planned/due dates from str/date/datetime to aware UTC datetimes.
        """
        return _parse_datetime(v)


# PUBLIC_INTERFACE
class TodoCreate(_TodoFields):
    """
    Schema for creating a new todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "order": 1,
                "createdByUserId": 1,
                "description": "Complete project documentation",
                "plannedDate": "2025-02-01",
                "dueDate": "2025-02-07T17:00:00Z",
            }
        }
    )

    created_by_user_id: int = Field(..., description="Id of the user creating the todo")


# PUBLIC_INTERFACE
class TodoUpdate(_TodoFields):
    """
    Schema for updating a todo item. The creator and creation time cannot change.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "order": 2,
                "description": "Complete and review project documentation",
                "plannedDate": "2025-02-02",
                "dueDate": None,
            }
        }
    )


# PUBLIC_INTERFACE
class TodoOut(ApiModel):
    """
    Schema returned by the API for a todo item.
    """

    id: int = Field(..., description="Unique identifier of the todo item")
    order: int = Field(..., description="Sort position of the todo")
    created_by_user_id: int = Field(..., description="Id of the user that created the todo")
    created_on: datetime = Field(..., description="Creation timestamp (UTC)")
    description: str = Field(..., description="Text of the todo item")
    planned_date: Optional[datetime] = Field(default=None, description="Planned date/time (UTC)")
    due_date: Optional[datetime] = Field(default=None, description="Deadline (UTC)")


# ---------------------------------------------------------------------------
# Data administration
# ---------------------------------------------------------------------------


class DataConfiguration(ApiModel):
    initialize_sample_data: bool


# PUBLIC_INTERFACE
class DataStatus(ApiModel):
    """Current size of the store and its sample-data setting."""

    user_count: int
    todo_count: int
    last_updated: datetime
    message: str
    configuration: DataConfiguration


# PUBLIC_INTERFACE
class DataResetResult(ApiModel):
    message: str
    user_count: int
    todo_count: int
    reset_time: datetime


# PUBLIC_INTERFACE
class DataInitializeResult(ApiModel):
    message: str
    user_count: int
    todo_count: int
    initialize_time: datetime


class UserSummary(ApiModel):
    id: int
    name: str
    email: str
    todo_count: int


class TodoSummary(ApiModel):
    id: int
    description: str
    order: int
    created_by: str = Field(..., description="Creator name, or 'Unknown' if the user was deleted")
    created_on: datetime
    planned_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    is_overdue: bool


# PUBLIC_INTERFACE
class DataSummary(ApiModel):
    """Per-user todo counts and per-todo creator/overdue information."""

    users: List[UserSummary]
    todos: List[TodoSummary]
    total_users: int
    total_todos: int
    overdue_todos: int
