"""Run catalog queries against open database handles."""

import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import sqlalchemy
from sqlalchemy.exc import DBAPIError

from ..config.logging_config import get_logger
from ..config.settings import DATABASE_NAMES
from ..database.manager import ConnectionManager, DatabaseHandle
from ..database.models import ResultSet, TableMetadata
from ..errors import (
    ConnectionClosedError,
    QueryError,
    QueryReferenceError,
    QuerySyntaxError,
    SqlWalkError,
)
from . import CATALOG, QueryExample


logger = get_logger("catalog.runner")

# SQLite added RIGHT and FULL OUTER JOIN in 3.39.0
NATIVE_OUTER_JOIN_VERSION = (3, 39, 0)

_REFERENCE_PATTERNS = (
    "no such table",
    "no such column",
    "ambiguous column name",
    "no such function",
)
_SYNTAX_PATTERNS = (
    "syntax error",
    "incomplete input",
    "unrecognized token",
    "one statement at a time",
    "do not have the same number of result columns",
    "misuse of aggregate",
    "wrong number of arguments",
    "are not currently supported",
)


def translate_error(error: DBAPIError, query: str) -> QueryError:
    """Map an engine error onto the query error taxonomy."""
    message = str(error.orig)
    lowered = message.lower()

    if any(pattern in lowered for pattern in _REFERENCE_PATTERNS):
        return QueryReferenceError(message, query=query)
    if any(pattern in lowered for pattern in _SYNTAX_PATTERNS):
        return QuerySyntaxError(message, query=query)
    return QueryError(message, query=query)


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def list_tables(handle: DatabaseHandle) -> List[str]:
    """Get the user tables of the database, in name order."""
    with handle.connection("list tables") as conn:
        result = conn.execute(sqlalchemy.text(
            "SELECT name FROM sqlite_master "
            "WHERE type = 'table' AND name NOT LIKE 'sqlite_%' "
            "ORDER BY name"
        )).fetchall()
    return [row[0] for row in result]


def describe_table(handle: DatabaseHandle, table_name: str) -> TableMetadata:
    """Get column information and row count for one table."""
    if table_name not in list_tables(handle):
        raise QueryReferenceError(f"no such table: {table_name}")

    quoted = _quote_identifier(table_name)
    with handle.connection("describe table") as conn:
        table_info = conn.execute(sqlalchemy.text(f"PRAGMA table_info({quoted})")).mappings().all()
        row_count = conn.execute(sqlalchemy.text(f"SELECT COUNT(*) FROM {quoted}")).scalar()

    return TableMetadata.from_table_info(table_name, [dict(info) for info in table_info], row_count)


def execute(handle: DatabaseHandle, query_text: str) -> ResultSet:
    """
    Execute query text and return its rows.

    The text goes to the driver untouched, so colons and percent signs in
    string literals need no escaping.

    Args:
        handle: An open database handle
        query_text: A single SQL statement

    Returns:
        ResultSet with the column names and rows produced by the engine

    Raises:
        ConnectionClosedError: If the handle is closed
        QuerySyntaxError: If the text is empty or malformed
        QueryReferenceError: If the text names an unknown table or column
        QueryError: For any other error reported by the engine
    """
    if handle.is_closed:
        raise ConnectionClosedError(handle.path, "execute query")
    if not query_text or not query_text.strip():
        raise QuerySyntaxError("Query text is empty", query=query_text)

    start_time = time.time()
    with handle.connection("execute query") as conn:
        try:
            result = conn.exec_driver_sql(query_text)
            if result.returns_rows:
                columns = tuple(result.keys())
                rows = [tuple(row) for row in result.fetchall()]
            else:
                columns, rows = (), []
        except DBAPIError as e:
            error = translate_error(e, query_text)
            logger.error(f"{type(error).__name__}: {error}")
            raise error from e

    execution_time = time.time() - start_time
    logger.debug(f"Query executed in {execution_time:.3f}s, returned {len(rows)} rows")

    return ResultSet(
        columns=columns,
        rows=rows,
        query=query_text,
        execution_time=execution_time
    )


def sqlite_version(handle: DatabaseHandle) -> Tuple[int, ...]:
    """Version of the SQLite library behind the handle."""
    with handle.connection("read engine version") as conn:
        version = conn.execute(sqlalchemy.text("SELECT sqlite_version()")).scalar()
    return tuple(int(part) for part in re.findall(r"\d+", version)[:3])


def supports_native_outer_join(handle: DatabaseHandle) -> bool:
    return sqlite_version(handle) >= NATIVE_OUTER_JOIN_VERSION


@dataclass
class ExampleRun:
    """Outcome of running one catalog example."""
    example: QueryExample
    result: Optional[ResultSet] = None
    error: Optional[SqlWalkError] = None
    skipped: bool = False
    mismatches: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None and not self.skipped

    @property
    def matches_expectations(self) -> bool:
        return self.success and not self.mismatches

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.example.name,
            "database": self.example.database,
            "success": self.success,
            "skipped": self.skipped,
            "error": str(self.error) if self.error else None,
            "mismatches": list(self.mismatches),
            "result": self.result.to_dict() if self.result else None
        }


def check_expectations(example: QueryExample, result: ResultSet) -> List[str]:
    """Compare a result with the documented expectations of its example."""
    mismatches = []
    if example.expected_columns is not None and result.columns != example.expected_columns:
        mismatches.append(
            f"expected columns {list(example.expected_columns)}, got {list(result.columns)}"
        )
    if example.expected_row_count is not None and result.row_count != example.expected_row_count:
        mismatches.append(
            f"expected {example.expected_row_count} rows, got {result.row_count}"
        )
    return mismatches


def run_example(handle: DatabaseHandle, example: QueryExample) -> ExampleRun:
    """
    Execute one example and check its documented expectations.

    Query errors propagate; expectation mismatches are recorded on the
    returned ExampleRun.
    """
    result = execute(handle, example.sql)
    mismatches = check_expectations(example, result)
    for mismatch in mismatches:
        logger.warning(f"{example.name}: {mismatch}")
    return ExampleRun(example=example, result=result, mismatches=mismatches)


def select_examples(
    databases: Optional[Sequence[str]] = None,
    names: Optional[Iterable[str]] = None
) -> List[QueryExample]:
    """Filter the catalog, keeping walkthrough order."""
    if databases:
        unknown = [db for db in databases if db not in DATABASE_NAMES]
        if unknown:
            raise ValueError(f"Unknown database(s): {', '.join(unknown)}")

    wanted = set(names) if names else None
    if wanted:
        known = {example.name for example in CATALOG}
        unknown = sorted(wanted - known)
        if unknown:
            raise KeyError(f"Unknown example(s): {', '.join(unknown)}")

    return [
        example for example in CATALOG
        if (not databases or example.database in databases)
        and (wanted is None or example.name in wanted)
    ]


def run_walkthrough(
    manager: ConnectionManager,
    databases: Optional[Sequence[str]] = None,
    names: Optional[Iterable[str]] = None,
    stop_on_error: bool = True
) -> Iterator[ExampleRun]:
    """
    Replay the walkthrough one database at a time.

    Each database is opened, its examples run in catalog order, and the
    handle is released before the next database is opened, on every exit
    path. With stop_on_error (the default) the first query error
    propagates; otherwise it is recorded on the ExampleRun and the walk
    continues.
    """
    examples = select_examples(databases, names)

    for database in DATABASE_NAMES:
        pending = [example for example in examples if example.database == database]
        if not pending:
            continue

        logger.info(f"Running {len(pending)} examples against {database}")
        with manager.session(database) as handle:
            native_outer_join = supports_native_outer_join(handle)

            for example in pending:
                if example.requires_native_outer_join and not native_outer_join:
                    logger.info(f"Skipping {example.name}: SQLite older than 3.39")
                    yield ExampleRun(example=example, skipped=True)
                    continue

                try:
                    run = run_example(handle, example)
                except QueryError as e:
                    if stop_on_error:
                        raise
                    run = ExampleRun(example=example, error=e)
                yield run
