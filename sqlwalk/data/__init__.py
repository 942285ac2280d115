"""Sample database building and validation"""

from .loader import build_database, load_csv, clean_table_name
from .validators import SchemaValidator, required_tables

__all__ = ["build_database", "load_csv", "clean_table_name", "SchemaValidator", "required_tables"]
