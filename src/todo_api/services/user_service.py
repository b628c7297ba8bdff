from __future__ import annotations

import logging
from typing import List, Optional

from ..errors import ConflictError, NotFoundError
from ..models import UserEntity
from ..schemas import UserCreate, UserUpdate
from ..store import InMemoryDataStore

logger = logging.getLogger(__name__)


def _by_name(user: UserEntity) -> str:
    return user["name"]


# PUBLIC_INTERFACE
class UserService:
    """
    CRUD and search over the store's users.

    Email addresses are unique across users, compared case-insensitively.
    Returned entities are copies; mutate users through ``update``.
    """

    def __init__(self, store: InMemoryDataStore) -> None:
        self._store = store

    def _find(self, user_id: int) -> Optional[UserEntity]:
        return next((u for u in self._store.users if u["id"] == user_id), None)

    def _find_by_email(self, email: str) -> Optional[UserEntity]:
        wanted = email.casefold()
        return next((u for u in self._store.users if u["email"].casefold() == wanted), None)

    def list_all(self) -> List[UserEntity]:
        """Return all users ordered by name."""
        with self._store.lock:
            return [u.copy() for u in sorted(self._store.users, key=_by_name)]

    def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        with self._store.lock:
            user = self._find(user_id)
            return None if user is None else user.copy()

    def get_by_email(self, email: str) -> Optional[UserEntity]:
        with self._store.lock:
            user = self._find_by_email(email)
            return None if user is None else user.copy()

    def search(self, term: Optional[str]) -> List[UserEntity]:
        """
        Return users whose name contains ``term`` (case-insensitive), ordered by name.
        An empty or missing term matches every user.
        """
        needle = (term or "").casefold()
        with self._store.lock:
            matches = [u for u in self._store.users if needle in u["name"].casefold()]
            return [u.copy() for u in sorted(matches, key=_by_name)]

    def exists(self, user_id: int) -> bool:
        with self._store.lock:
            return self._find(user_id) is not None

    def create(self, data: UserCreate) -> UserEntity:
        """
        Create a user.

        Raises:
            ConflictError: another user already has this email.
        """
        with self._store.lock:
            if self._find_by_email(data.email) is not None:
                logger.warning("Rejected user create: email %s already in use", data.email)
                raise ConflictError(f"User with email {data.email} already exists")

            user: UserEntity = {
                "id": self._store.allocate_user_id(),
                "name": data.name,
                "email": data.email,
            }
            self._store.users.append(user)
            logger.info("Created user %d (%s)", user["id"], user["email"])
            return user.copy()

    def update(self, user_id: int, data: UserUpdate) -> UserEntity:
        """
        Overwrite the name and email of a user; the id never changes.

        Raises:
            NotFoundError: no user has ``user_id``.
            ConflictError: the new email belongs to a different user.
        """
        with self._store.lock:
            user = self._find(user_id)
            if user is None:
                raise NotFoundError(f"User with ID {user_id} not found")

            owner = self._find_by_email(data.email)
            if owner is not None and owner["id"] != user_id:
                logger.warning("Rejected update of user %d: email %s already in use", user_id, data.email)
                raise ConflictError(f"User with email {data.email} already exists")

            user["name"] = data.name
            user["email"] = data.email
            logger.info("Updated user %d", user_id)
            return user.copy()

    def delete(self, user_id: int) -> bool:
        """
        Remove a user. Todos created by the user are left in place.
        Return True if deleted, False if not found.
        """
        with self._store.lock:
            user = self._find(user_id)
            if user is None:
                return False
            self._store.users.remove(user)
            logger.info("Deleted user %d", user_id)
            return True
