from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from ..dependencies import get_user_service
from ..errors import NotFoundError
from ..schemas import UserCreate, UserOut, UserUpdate
from ..services import UserService

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
)


def _not_found(user_id: int) -> NotFoundError:
    return NotFoundError(f"User with ID {user_id} not found")


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[UserOut],
    summary="List Users",
    description="Get all users ordered by name.",
)
def list_users(service: UserService = Depends(get_user_service)) -> List[UserOut]:
    """List all users ordered by name."""
    return [UserOut(**u) for u in service.list_all()]


# PUBLIC_INTERFACE
@router.get(
    "/search",
    response_model=List[UserOut],
    summary="Search Users",
    description="Find users whose name contains the search term (case-insensitive). An empty term matches all users.",
)
def search_users(
    search_term: Optional[str] = Query(None, alias="searchTerm", description="Text to look for in user names"),
    service: UserService = Depends(get_user_service),
) -> List[UserOut]:
    """Search users by part of their name."""
    return [UserOut(**u) for u in service.search(search_term)]


# PUBLIC_INTERFACE
@router.get(
    "/email/{email}",
    response_model=UserOut,
    summary="Get User by Email",
    description="Get a single user by email address (case-insensitive).",
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found"},
    },
)
def get_user_by_email(email: str, service: UserService = Depends(get_user_service)) -> UserOut:
    """Retrieve a user by email address."""
    user = service.get_by_email(email)
    if not user:
        raise NotFoundError(f"User with email {email} not found")
    return UserOut(**user)


# PUBLIC_INTERFACE
@router.get(
    "/{user_id}",
    name="get_user",
    response_model=UserOut,
    summary="Get User",
    description="Get a single user by ID.",
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found"},
    },
)
def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserOut:
    """Retrieve a single user by ID."""
    user = service.get_by_id(user_id)
    if not user:
        raise _not_found(user_id)
    return UserOut(**user)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create a new user. The email must not be used by another user.",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Validation error"},
        409: {"description": "Email already in use"},
    },
)
def create_user(
    payload: UserCreate,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> UserOut:
    """Create a new user with a unique email."""
    created = service.create(payload)
    response.headers["Location"] = str(request.url_for("get_user", user_id=created["id"]))
    return UserOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{user_id}",
    response_model=UserOut,
    summary="Update User",
    description="Replace the name and email of an existing user.",
    responses={
        200: {"description": "User updated"},
        400: {"description": "Validation error"},
        404: {"description": "User not found"},
        409: {"description": "Email already in use"},
    },
)
def update_user(user_id: int, payload: UserUpdate, service: UserService = Depends(get_user_service)) -> UserOut:
    """Replace the name and email of a user."""
    return UserOut(**service.update(user_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete User",
    description="Delete a user by ID. Todos created by the user are kept.",
    responses={
        204: {"description": "User deleted"},
        404: {"description": "User not found"},
    },
)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user, keeping their todos."""
    if not service.delete(user_id):
        raise _not_found(user_id)
    return None
