# tests/conftest.py - v1
"""Shared test fixtures: sample users, columns and directory files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from nlpcontracts.logging.context import clear_context
from nlpcontracts.sqlgen.models import SqlColumn
from nlpcontracts.users.models import UserDescriptor


# === FIXTURES: Users ===


@pytest.fixture
def full_user() -> UserDescriptor:
    """User with every optional attribute present."""
    return UserDescriptor(
        id=7,
        first_name="Jane",
        last_name="Roe",
        email="jane@example.com",
        avatar_url="https://example.com/avatars/7.png",
        properties={"tier": "gold", "locale": "en_US", "team": "search"},
        is_admin=False,
        signup_timestamp=1_650_000_000_000,
    )


@pytest.fixture
def sparse_user() -> UserDescriptor:
    """User with every optional attribute absent."""
    return UserDescriptor(
        id=42,
        first_name=None,
        last_name=None,
        email=None,
        avatar_url=None,
        properties=None,
        is_admin=True,
        signup_timestamp=1_700_000_000_000,
    )


@pytest.fixture
def user_records() -> list[dict]:
    """Raw camelCase records as stored by the JSON directory."""
    return [
        {
            "id": 1,
            "firstName": "John",
            "lastName": "Doe",
            "email": "john@example.com",
            "avatarUrl": None,
            "properties": {"plan": "free"},
            "isAdmin": False,
            "signupTimestamp": 1_600_000_000_000,
        },
        {
            "id": 2,
            "firstName": None,
            "lastName": None,
            "email": None,
            "avatarUrl": None,
            "properties": None,
            "isAdmin": True,
            "signupTimestamp": 0,
        },
    ]


@pytest.fixture
def users_file(tmp_path: Path, user_records: list[dict]) -> Path:
    path = tmp_path / "users.json"
    path.write_text(json.dumps(user_records), encoding="utf-8")
    return path


# === FIXTURES: SQL ===


@pytest.fixture
def created_at_column() -> SqlColumn:
    return SqlColumn(table="orders", column="created_at", data_type="TIMESTAMP")


@pytest.fixture
def id_column() -> SqlColumn:
    return SqlColumn(
        table="orders", column="id", data_type="BIGINT",
        is_primary_key=True, is_nullable=False,
    )


# === FIXTURES: Logging ===


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    root = logging.getLogger("nlpcontracts")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
