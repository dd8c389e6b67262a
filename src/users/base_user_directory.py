# src/users/base_user_directory.py - v1
"""Abstract user directory interface.

A directory owns user ids: it is the place where id uniqueness is enforced,
not UserDescriptor itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from nlpcontracts.logging.logger import get_logger
from nlpcontracts.users.models import UserDescriptor

logger = get_logger("users.directory")


class UserDirectoryError(Exception):
    """Raised when a directory cannot be loaded or updated."""


class UserNotFoundError(UserDirectoryError):
    """Raised by require_user() when no user has the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"Unknown user id: {user_id}")
        self.user_id = user_id


class BaseUserDirectory(ABC):
    """Unified interface for user directory backends."""

    @abstractmethod
    def get_user(self, user_id: int) -> UserDescriptor | None:
        """Look a user up by id. Returns None on a miss."""

    @abstractmethod
    def list_users(self) -> list[UserDescriptor]:
        """List all known users."""

    def require_user(self, user_id: int) -> UserDescriptor:
        """Like get_user(), but raise UserNotFoundError on a miss."""
        user = self.get_user(user_id)
        if user is None:
            logger.warning(
                "Required user %d not found", user_id, extra={"data": {"user_id": user_id}}
            )
            raise UserNotFoundError(user_id)
        return user
