"""Exceptions raised by the connection manager and the query runner."""

from typing import Optional


class SqlWalkError(Exception):
    """Base class for all sqlwalk errors."""


class NotFoundError(SqlWalkError):
    """The database file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Database file not found: {path}")


class AccessError(SqlWalkError):
    """The database file exists but cannot be opened for reading."""

    def __init__(self, path, reason: str = "permission denied"):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open database {path}: {reason}")


class ConnectionClosedError(SqlWalkError):
    """An operation was issued against a closed handle."""

    def __init__(self, path, operation: str = "query"):
        self.path = path
        self.operation = operation
        super().__init__(f"Cannot {operation}: handle for {path} is closed")


class InvalidStateError(SqlWalkError):
    """A handle was closed twice."""


class QueryError(SqlWalkError):
    """Base class for errors reported by the engine for a specific query."""

    def __init__(self, message: str, query: Optional[str] = None):
        self.query = query
        super().__init__(message)


class QuerySyntaxError(QueryError):
    """The query text is malformed."""


class QueryReferenceError(QueryError):
    """The query names a table or column that does not exist."""
