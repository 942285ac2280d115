"""Result and metadata classes."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import pandas as pd


@dataclass
class ResultSet:
    """Rows returned by one query against one open handle."""
    columns: Tuple[str, ...]
    rows: List[Tuple[Any, ...]] = field(default_factory=list)
    query: Optional[str] = None
    execution_time: float = 0.0

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.records())

    def records(self) -> List[Dict[str, Any]]:
        """Rows as column-name mappings. NULLs come back as None."""
        return [dict(zip(self.columns, row)) for row in self.rows]

    def column(self, name: str) -> List[Any]:
        """All values of one column, in row order."""
        try:
            index = self.columns.index(name)
        except ValueError:
            raise KeyError(name) from None
        return [row[index] for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a DataFrame; duplicate column names are kept."""
        return pd.DataFrame.from_records(self.rows, columns=list(self.columns))

    def render(self, max_rows: Optional[int] = 20) -> str:
        """Render as a text table for human reading."""
        if not self.columns:
            return "(no columns)"
        if not self.rows:
            return " | ".join(self.columns) + "\n(0 rows)"

        shown = self.rows if max_rows is None else self.rows[:max_rows]
        # SQLite NULLs arrive as None; pandas would print them as "None"
        display = [tuple("NULL" if value is None else value for value in row) for row in shown]
        text = pd.DataFrame.from_records(display, columns=list(self.columns)).to_string(index=False)

        hidden = self.row_count - len(shown)
        if hidden > 0:
            text += f"\n... ({hidden} more rows)"
        return text + f"\n({self.row_count} rows)"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "query": self.query,
            "columns": list(self.columns),
            "rows": [list(row) for row in self.rows],
            "row_count": self.row_count,
            "execution_time": self.execution_time
        }


@dataclass
class ColumnMetadata:
    """Metadata for a database column."""
    name: str
    data_type: str
    is_nullable: bool = True
    is_primary_key: bool = False
    default: Optional[str] = None


@dataclass
class TableMetadata:
    """Metadata for a database table."""
    name: str
    columns: List[ColumnMetadata]
    row_count: int = 0

    @property
    def column_names(self) -> List[str]:
        return [col.name for col in self.columns]

    @classmethod
    def from_table_info(cls, name: str, table_info: List[Dict[str, Any]], row_count: int = 0) -> "TableMetadata":
        """Create table metadata from the rows of ``PRAGMA table_info``."""
        columns = [
            ColumnMetadata(
                name=info["name"],
                data_type=info["type"] or "",
                is_nullable=not info["notnull"],
                is_primary_key=bool(info["pk"]),
                default=info["dflt_value"]
            )
            for info in table_info
        ]
        return cls(name=name, columns=columns, row_count=row_count)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'name': self.name,
            'columns': [
                {
                    'name': col.name,
                    'data_type': col.data_type,
                    'is_nullable': col.is_nullable,
                    'is_primary_key': col.is_primary_key,
                    'default': col.default
                }
                for col in self.columns
            ],
            'row_count': self.row_count
        }
