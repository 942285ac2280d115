"""Database handles and result sets over SQLite"""

from .manager import ConnectionManager, DatabaseHandle, open_database, close_database
from .models import ResultSet, TableMetadata, ColumnMetadata

__all__ = [
    "ConnectionManager",
    "DatabaseHandle",
    "open_database",
    "close_database",
    "ResultSet",
    "TableMetadata",
    "ColumnMetadata",
]
