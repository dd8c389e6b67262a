# src/users/directories/json_directory.py - v1
"""JSON file-based user directory (USER_DIRECTORY_BACKEND=json).

The file holds a JSON array of user records keyed by the camelCase
contract names:

    [{"id": 42, "firstName": null, "lastName": "Doe", ...}]

The whole file is loaded once at construction.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from nlpcontracts.users.base_user_directory import UserDirectoryError
from nlpcontracts.users.directories.memory_directory import InMemoryUserDirectory
from nlpcontracts.users.models import UserDescriptor

logger = logging.getLogger(__name__)


class JsonUserDirectory(InMemoryUserDirectory):
    """Read-only snapshot of the users stored in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        super().__init__(self._load())
        logger.info("Loaded %d users from %s", len(self), self._path)

    @property
    def path(self) -> Path:
        return self._path

    def add(self, user: UserDescriptor) -> None:
        raise UserDirectoryError(
            f"{self._path} is loaded read-only; cannot add user {user.id}"
        )

    def _load(self) -> list[UserDescriptor]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise UserDirectoryError(f"Cannot read {self._path}: {e}") from e
        except json.JSONDecodeError as e:
            raise UserDirectoryError(f"Malformed JSON in {self._path}: {e}") from e

        if not isinstance(data, list):
            raise UserDirectoryError(
                f"{self._path} must contain a JSON array of user records"
            )

        users: list[UserDescriptor] = []
        for i, record in enumerate(data):
            try:
                users.append(UserDescriptor.model_validate(record))
            except ValidationError as e:
                raise UserDirectoryError(
                    f"Invalid user record #{i} in {self._path}: {e}"
                ) from e
        return users
