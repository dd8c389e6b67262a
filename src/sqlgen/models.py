# src/sqlgen/models.py - v1
"""SQL schema descriptors: SqlColumn, SqlTable.

Built by the schema builder when compiling a model's table definitions.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from nlpcontracts.sqlgen.base_sort import BaseSqlSort


class SqlColumn(BaseModel):
    """Single column of a SQL table."""

    model_config = ConfigDict(frozen=True)

    table: str
    column: str
    data_type: str
    is_primary_key: bool = False
    is_nullable: bool = True

    @property
    def qualified_name(self) -> str:
        return f"{self.table}.{self.column}"


class SqlTable(BaseModel):
    """SQL table with its columns and default sort.

    ``default_sort`` is held exactly as produced; the table neither computes
    it nor checks that its columns belong here.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    table: str
    columns: tuple[SqlColumn, ...]
    default_sort: tuple[BaseSqlSort, ...] = ()
    select: tuple[str, ...] = ()
    extra_tables: tuple[str, ...] = ()

    def find_column(self, name: str) -> SqlColumn | None:
        """Return the column called ``name``, or None."""
        for col in self.columns:
            if col.column == name:
                return col
        return None
