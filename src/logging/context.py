# src/logging/context.py - v1
"""Contextual logging support: attach request_id and user_id to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set once per incoming request.
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_user_id: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "user_id", default=None
)


@dataclass(frozen=True)
class LogContext:
    """Immutable snapshot of current logging context."""

    request_id: str | None = None
    user_id: int | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(request_id=_request_id.get(), user_id=_user_id.get())


def set_request_context(request_id: str, user_id: int | None = None) -> None:
    """Set request-level context."""
    _request_id.set(request_id)
    _user_id.set(user_id)


def clear_context() -> None:
    """Reset all context variables."""
    _request_id.set(None)
    _user_id.set(None)
