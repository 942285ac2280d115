"""Schema checks for the sample databases."""

from typing import Dict, List

from ..catalog import examples_for
from ..catalog.runner import list_tables
from ..config.logging_config import get_logger
from ..database.manager import DatabaseHandle


logger = get_logger("data.validators")


def required_tables(database: str) -> List[str]:
    """Every table the walkthrough queries for one database, sorted."""
    tables = set()
    for example in examples_for(database):
        tables.update(example.tables)
    return sorted(tables)


class SchemaValidator:
    """Validator for the tables a sample database must provide."""

    def missing_tables(self, handle: DatabaseHandle, database: str) -> List[str]:
        """Tables the walkthrough needs that the database does not have."""
        present = set(list_tables(handle))
        return [table for table in required_tables(database) if table not in present]

    def validate_database(self, handle: DatabaseHandle, database: str) -> bool:
        """
        Validate that a database can serve its part of the walkthrough.

        Args:
            handle: Open handle to the database
            database: Logical database name ('animals' or 'sales')

        Returns:
            True if valid

        Raises:
            ValueError: If required tables are missing
        """
        missing = self.missing_tables(handle, database)
        if missing:
            raise ValueError(f"Database {handle.path} is missing tables: {', '.join(missing)}")

        logger.info(f"Validated {database} database at {handle.path}")
        return True

    def table_report(self, handle: DatabaseHandle, database: str) -> Dict[str, bool]:
        """Map each required table to whether it is present."""
        present = set(list_tables(handle))
        return {table: table in present for table in required_tables(database)}
