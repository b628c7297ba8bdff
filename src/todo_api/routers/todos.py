from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response, status

from ..dependencies import get_todo_service
from ..errors import NotFoundError
from ..schemas import TodoCreate, TodoOut, TodoUpdate, as_utc
from ..services import TodoService

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)


def _not_found(todo_id: int) -> NotFoundError:
    return NotFoundError(f"Todo with ID {todo_id} not found")


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="Get all todo items ordered by their order field.",
)
def list_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoOut]:
    """List all todos ordered by ``order``."""
    return [TodoOut(**t) for t in service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/user/{user_id}",
    response_model=List[TodoOut],
    summary="List Todos by User",
    description="Get all todo items created by a user, ordered by their order field.",
)
def list_todos_by_user(user_id: int, service: TodoService = Depends(get_todo_service)) -> List[TodoOut]:
    """List the todos created by one user."""
    return [TodoOut(**t) for t in service.list_by_user(user_id)]


# PUBLIC_INTERFACE
@router.get(
    "/overdue",
    response_model=List[TodoOut],
    summary="List Overdue Todos",
    description="Get todo items whose due date is in the past, earliest due date first.",
)
def list_overdue_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoOut]:
    """List todos whose due date has passed."""
    return [TodoOut(**t) for t in service.list_overdue()]


# PUBLIC_INTERFACE
@router.get(
    "/daterange",
    response_model=List[TodoOut],
    summary="List Todos in Date Range",
    description=(
        "Get todo items whose planned date or due date falls within the range.\n\n"
        "Query parameters:\n"
        "- startDate: start of the range (inclusive)\n"
        "- endDate: end of the range (inclusive)\n\n"
        "Datetimes without a timezone are taken to be UTC."
    ),
    responses={
        200: {"description": "List retrieved successfully"},
        400: {"description": "Missing or invalid dates"},
    },
)
def list_todos_by_date_range(
    start_date: datetime = Query(..., alias="startDate", description="Start of the range (inclusive)"),
    end_date: datetime = Query(..., alias="endDate", description="End of the range (inclusive)"),
    service: TodoService = Depends(get_todo_service),
) -> List[TodoOut]:
    """List todos planned or due within a date range."""
    items = service.list_by_date_range(as_utc(start_date), as_utc(end_date))
    return [TodoOut(**t) for t in items]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    name="get_todo",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
def get_todo(todo_id: int, service: TodoService = Depends(get_todo_service)) -> TodoOut:
    """Retrieve a single Todo item by its ID."""
    item = service.get_by_id(todo_id)
    if not item:
        raise _not_found(todo_id)
    return TodoOut(**item)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new todo item for an existing user and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"description": "Validation error or unknown user"},
    },
)
def create_todo(
    payload: TodoCreate,
    request: Request,
    response: Response,
    service: TodoService = Depends(get_todo_service),
) -> TodoOut:
    """Create a new Todo for an existing user."""
    created = service.create(payload)
    response.headers["Location"] = str(request.url_for("get_todo", todo_id=created["id"]))
    return TodoOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description=(
        "Replace the order, description, planned date and due date of a todo item. "
        "Omitted dates are cleared. The creator and creation time never change."
    ),
    responses={
        200: {"description": "Todo updated"},
        400: {"description": "Validation error"},
        404: {"description": "Todo not found"},
    },
)
def update_todo(todo_id: int, payload: TodoUpdate, service: TodoService = Depends(get_todo_service)) -> TodoOut:
    """Replace the editable fields of a Todo."""
    return TodoOut(**service.update(todo_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Delete a todo item by ID.",
    responses={
        204: {"description": "Todo deleted"},
        404: {"description": "Todo not found"},
    },
)
def delete_todo(todo_id: int, service: TodoService = Depends(get_todo_service)) -> None:
    """Delete a Todo by its ID."""
    if not service.delete(todo_id):
        raise _not_found(todo_id)
    return None
