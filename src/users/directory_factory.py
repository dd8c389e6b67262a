# src/users/directory_factory.py - v1
"""Factory for user directory instantiation."""

from __future__ import annotations

from nlpcontracts.config.settings import Settings
from nlpcontracts.users.base_user_directory import BaseUserDirectory


def create_user_directory(settings: Settings | None = None) -> BaseUserDirectory:
    """Instantiate the configured user directory backend.

    Args:
        settings: Application settings. Defaults to an empty in-memory directory.

    Returns:
        Configured BaseUserDirectory implementation.
    """
    backend = "memory" if settings is None else settings.user_directory_backend

    if backend == "memory":
        from nlpcontracts.users.directories.memory_directory import (
            InMemoryUserDirectory,
        )
        return InMemoryUserDirectory()

    if backend == "json":
        # Settings guarantees a path for this backend.
        from nlpcontracts.users.directories.json_directory import JsonUserDirectory
        return JsonUserDirectory(settings.user_directory_path)

    raise ValueError(f"Unsupported user directory backend: {backend!r}")
