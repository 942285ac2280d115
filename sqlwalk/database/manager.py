""" Connection manager for the local SQLite sample databases """

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

import sqlalchemy
from sqlalchemy import create_engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.pool import StaticPool

from ..config.logging_config import get_logger
from ..config.settings import DATABASE_NAMES, DatabaseConfig
from ..errors import (
    AccessError,
    ConnectionClosedError,
    InvalidStateError,
    NotFoundError,
)


logger = get_logger("database.manager")

PathLike = Union[str, Path]


class DatabaseHandle:
    """
    An open, exclusively owned connection to one SQLite file.

    The handle owns a SQLAlchemy engine bound to a single DBAPI connection.
    It must be closed exactly once; use it as a context manager to get that
    on every exit path.
    """

    def __init__(self, path: Path, engine: sqlalchemy.engine.Engine, read_only: bool = True):
        self.path = path
        self.read_only = read_only
        self._engine = engine

    @property
    def is_closed(self) -> bool:
        return self._engine is None

    @contextmanager
    def connection(self, operation: str = "query") -> Iterator[sqlalchemy.engine.Connection]:
        """Yield a SQLAlchemy connection, refusing if the handle is closed."""
        if self._engine is None:
            raise ConnectionClosedError(self.path, operation)
        with self._engine.connect() as conn:
            yield conn

    def close(self) -> None:
        """Release the engine. Closing twice raises InvalidStateError."""
        if self._engine is None:
            raise InvalidStateError(f"Handle for {self.path} is already closed")
        engine, self._engine = self._engine, None
        engine.dispose()
        logger.info(f"Closed database {self.path}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if not self.is_closed:
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self.is_closed else "open"
        return f"<DatabaseHandle {self.path} ({state})>"


def _sqlite_uri(path: Path, read_only: bool) -> str:
    """SQLite URI for an absolute path; as_uri() percent-encodes # ? and %."""
    mode = "ro" if read_only else "rw"
    return f"{path.as_uri()}?mode={mode}"


def open_database(path: PathLike, read_only: bool = True) -> DatabaseHandle:
    """
    Open a handle to a local SQLite file.

    Args:
        path: Path to the database file
        read_only: Open with SQLite's read-only mode

    Returns:
        An open DatabaseHandle

    Raises:
        NotFoundError: If the file does not exist
        AccessError: If the file cannot be read or is not a SQLite database
    """
    db_path = Path(path).absolute()

    if not db_path.exists():
        logger.error(f"Database file not found: {db_path}")
        raise NotFoundError(db_path)
    if db_path.is_dir():
        raise AccessError(db_path, "path is a directory")
    if not os.access(db_path, os.R_OK):
        raise AccessError(db_path, "permission denied")

    uri = _sqlite_uri(db_path, read_only)

    # The URI goes straight to sqlite3 so SQLAlchemy never parses the path
    engine = create_engine(
        "sqlite://",
        creator=lambda: sqlite3.connect(uri, uri=True, check_same_thread=False),
        poolclass=StaticPool,
        echo=False
    )

    # Force the connection now so a bad file fails at open rather than at
    # the first query
    try:
        with engine.connect() as conn:
            conn.execute(sqlalchemy.text("SELECT name FROM sqlite_master LIMIT 1")).fetchall()
    except DBAPIError as e:
        engine.dispose()
        logger.error(f"Failed to open {db_path}: {e.orig}")
        raise AccessError(db_path, str(e.orig)) from e

    logger.info(f"Opened database {db_path} ({'read-only' if read_only else 'read-write'})")
    return DatabaseHandle(db_path, engine, read_only=read_only)


def close_database(handle: DatabaseHandle) -> None:
    """Close a handle. Raises InvalidStateError if it is already closed."""
    handle.close()


class ConnectionManager:
    """
    Opens the sample databases by logical name or by path.
    """

    def __init__(self, config: Optional[DatabaseConfig] = None):
        """
        Initialize connection manager.

        Args:
            config: Database locations; defaults to DatabaseConfig()
        """
        self.config = config or DatabaseConfig()

    def resolve(self, name_or_path: PathLike) -> Path:
        """Map 'animals' / 'sales' to their configured files; pass other paths through."""
        if isinstance(name_or_path, str) and name_or_path in DATABASE_NAMES:
            return self.config.get_path(name_or_path)
        return Path(name_or_path)

    def open(self, name_or_path: PathLike) -> DatabaseHandle:
        return open_database(self.resolve(name_or_path), read_only=self.config.read_only)

    def close(self, handle: DatabaseHandle) -> None:
        close_database(handle)

    @contextmanager
    def session(self, name_or_path: PathLike) -> Iterator[DatabaseHandle]:
        """Open a handle and release it on every exit path."""
        handle = self.open(name_or_path)
        try:
            yield handle
        finally:
            if not handle.is_closed:
                handle.close()
