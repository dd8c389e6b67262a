"""Descriptor types of the model-authoring API: users and SQL sorting."""

from nlpcontracts.sqlgen.base_sort import BaseSqlSort
from nlpcontracts.sqlgen.models import SqlColumn, SqlTable
from nlpcontracts.sqlgen.sort import SqlSort
from nlpcontracts.users.models import UserDescriptor
from nlpcontracts.version import __version__

__all__ = [
    "BaseSqlSort",
    "SqlColumn",
    "SqlSort",
    "SqlTable",
    "UserDescriptor",
    "__version__",
]
