# src/sqlgen/sort.py - v1
"""Default SqlSort implementation."""

from __future__ import annotations

from typing import Any

from nlpcontracts.sqlgen.base_sort import BaseSqlSort
from nlpcontracts.sqlgen.models import SqlColumn


class SqlSort(BaseSqlSort):
    """Immutable (column, direction) pair.

    The column reference is kept as given; membership in the enclosing
    table is not checked here.
    """

    __slots__ = ("_column", "_ascending")

    def __init__(self, column: SqlColumn, ascending: bool) -> None:
        object.__setattr__(self, "_column", column)
        object.__setattr__(self, "_ascending", ascending)

    @property
    def column(self) -> SqlColumn:
        return self._column

    @property
    def ascending(self) -> bool:
        return self._ascending

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[SqlSort], tuple[SqlColumn, bool]]:
        # Rebuild through __init__; slot restore would hit __setattr__.
        return (type(self), (self._column, self._ascending))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SqlSort):
            return NotImplemented
        return self._column == other._column and self._ascending == other._ascending

    def __hash__(self) -> int:
        return hash((self._column, self._ascending))

    def __repr__(self) -> str:
        direction = "ASC" if self._ascending else "DESC"
        return f"SqlSort({self._column.qualified_name} {direction})"
