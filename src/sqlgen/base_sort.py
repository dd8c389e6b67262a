# src/sqlgen/base_sort.py - v1
"""Abstract SQL sort interface.

Produced by the schema builder (a table's default sort) and by the
extractor (sort derived from a recognized token). Consumers depend on this
interface only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nlpcontracts.sqlgen.models import SqlColumn


class BaseSqlSort(ABC):
    """Sort direction applied to a single SQL column."""

    __slots__ = ()

    @property
    @abstractmethod
    def column(self) -> SqlColumn:
        """SQL column this sort is applied to."""

    @property
    @abstractmethod
    def ascending(self) -> bool:
        """True for ascending sorting, False for descending."""
