# src/users/directories/memory_directory.py - v1
"""In-memory user directory (default USER_DIRECTORY_BACKEND=memory)."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nlpcontracts.users.base_user_directory import BaseUserDirectory, UserDirectoryError
from nlpcontracts.users.models import UserDescriptor

logger = logging.getLogger(__name__)


class InMemoryUserDirectory(BaseUserDirectory):
    """User directory backed by a dict keyed on user id."""

    def __init__(self, users: Iterable[UserDescriptor] = ()) -> None:
        self._users: dict[int, UserDescriptor] = {}
        for user in users:
            self._register(user)

    def add(self, user: UserDescriptor) -> None:
        """Register a user. Duplicate ids are rejected."""
        self._register(user)

    def _register(self, user: UserDescriptor) -> None:
        if user.id in self._users:
            raise UserDirectoryError(f"Duplicate user id: {user.id}")
        self._users[user.id] = user

    def get_user(self, user_id: int) -> UserDescriptor | None:
        user = self._users.get(user_id)
        if user is None:
            logger.debug("User %d not found", user_id)
        return user

    def list_users(self) -> list[UserDescriptor]:
        return list(self._users.values())

    def __len__(self) -> int:
        return len(self._users)
