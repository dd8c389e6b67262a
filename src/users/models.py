# src/users/models.py - v1
"""User profile descriptor handed to request-processing code.

Instances are read-only snapshots built by a user directory at lookup time.
Optional attributes are ``None`` when absent; no other value stands in for
absence.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class UserDescriptor(BaseModel):
    """Immutable snapshot of one end-user's profile attributes.

    Values are stored exactly as supplied. Content checks (email syntax,
    id positivity, trimming) belong to whoever builds the descriptor.
    Both snake_case names and the camelCase contract names (``firstName``,
    ``signupTimestamp``...) are accepted on construction.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    first_name: str | None
    last_name: str | None
    email: str | None
    avatar_url: str | None
    properties: Mapping[str, str] | None
    is_admin: bool
    signup_timestamp: int  # epoch milliseconds

    @field_validator("properties", mode="before")
    @classmethod
    def copy_properties(cls, v: Any) -> Any:
        # Accepts read-only views (e.g. another descriptor's properties).
        if isinstance(v, Mapping) and not isinstance(v, dict):
            return dict(v)
        return v

    @field_validator("properties", mode="after")
    @classmethod
    def freeze_properties(
        cls, v: Mapping[str, str] | None
    ) -> Mapping[str, str] | None:
        if v is None:
            return None
        return MappingProxyType(dict(v))

    @field_serializer("properties")
    def serialize_properties(
        self, v: Mapping[str, str] | None
    ) -> dict[str, str] | None:
        return None if v is None else dict(v)

    # mappingproxy cannot be pickled or deep-copied: state carries a plain
    # dict and the read-only view is rebuilt on restore.

    def __getstate__(self) -> dict[Any, Any]:
        state = super().__getstate__()
        props = state["__dict__"].get("properties")
        if props is not None:
            state = {**state, "__dict__": {**state["__dict__"], "properties": dict(props)}}
        return state

    def __setstate__(self, state: dict[Any, Any]) -> None:
        super().__setstate__(state)
        props = self.__dict__.get("properties")
        if props is not None and not isinstance(props, MappingProxyType):
            self.__dict__["properties"] = MappingProxyType(dict(props))

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> UserDescriptor:
        # Every field value is immutable, so a shallow copy is already deep.
        copied = self.__copy__()
        if memo is not None:
            memo[id(self)] = copied
        return copied

    def __hash__(self) -> int:
        props = None if self.properties is None else frozenset(self.properties.items())
        return hash(
            (
                self.id,
                self.first_name,
                self.last_name,
                self.email,
                self.avatar_url,
                props,
                self.is_admin,
                self.signup_timestamp,
            )
        )
