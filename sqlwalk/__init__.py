"""
sqlwalk: an SQL walkthrough over two local sample databases

Replays a sequence of teaching queries (SELECT, WHERE, joins, GROUP BY,
set operations and more) against animals.sqlite and sales.sqlite and
renders each result for a human reader.
"""

__version__ = "0.1.0"

from .catalog import CATALOG, QueryExample, get_example, examples_for
from .catalog.runner import execute, list_tables, describe_table, run_walkthrough
from .config.settings import SqlWalkConfig
from .database.manager import ConnectionManager, DatabaseHandle, open_database, close_database
from .database.models import ResultSet

__all__ = [
    "CATALOG",
    "QueryExample",
    "get_example",
    "examples_for",
    "execute",
    "list_tables",
    "describe_table",
    "run_walkthrough",
    "SqlWalkConfig",
    "ConnectionManager",
    "DatabaseHandle",
    "open_database",
    "close_database",
    "ResultSet",
]
