"""Build the sample SQLite databases from CSV files or DataFrames"""

import re
import time
from pathlib import Path
from typing import Dict, Mapping, Union

import pandas as pd
from sqlalchemy import create_engine
from sqlalchemy.engine import URL

from ..config.logging_config import get_logger


logger = get_logger("data.loader")

TableSource = Union[pd.DataFrame, str, Path]


def clean_table_name(table_name: str) -> str:
    """Clean table name for SQL compatibility."""
    # Remove special characters and replace with underscores
    clean_name = re.sub(r'[^\w]', '_', table_name)

    # Ensure it doesn't start with a digit
    if clean_name and clean_name[0].isdigit():
        clean_name = f"table_{clean_name}"

    clean_name = clean_name[:64]

    if not clean_name:
        clean_name = "table_1"

    return clean_name.lower()


def load_csv(csv_path: Union[str, Path]) -> pd.DataFrame:
    """Read a CSV file, normalising header names to snake case."""
    df = pd.read_csv(csv_path, header=0)
    df.columns = [
        re.sub(r'\W+', '_', str(col).strip()).strip('_').lower()
        for col in df.columns
    ]
    return df


def build_database(
    db_path: Union[str, Path],
    tables: Mapping[str, TableSource],
    if_exists: str = "replace"
) -> Dict[str, int]:
    """
    Write tables into a SQLite file, creating it if needed.

    Args:
        db_path: Target database file
        tables: Table name -> DataFrame or CSV path
        if_exists: What to do if a table exists ('replace', 'append', 'fail')

    Returns:
        Row count written per (cleaned) table name
    """
    if if_exists not in ("replace", "append", "fail"):
        raise ValueError(f"Invalid if_exists value: {if_exists}")

    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    # URL.create keeps the path verbatim; a formatted URL would decode % and split on ?
    engine = create_engine(URL.create("sqlite", database=str(db_path)), echo=False)
    written = {}
    try:
        for table_name, source in tables.items():
            start_time = time.time()

            df = source if isinstance(source, pd.DataFrame) else load_csv(source)
            clean_name = clean_table_name(table_name)

            df.to_sql(clean_name, engine, if_exists=if_exists, index=False)
            written[clean_name] = len(df)

            execution_time = time.time() - start_time
            logger.info(f"Uploaded table '{clean_name}' with {len(df)} rows, "
                        f"{len(df.columns)} columns in {execution_time:.2f}s")
    finally:
        engine.dispose()

    return written
