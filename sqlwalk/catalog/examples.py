"""Query example value type."""

import re
import textwrap
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..config.settings import DATABASE_NAMES


_STRING_LITERAL = re.compile(r"'(?:[^']|'')*'")
_ORDER_BY = re.compile(r"\bORDER\s+BY\b", re.IGNORECASE)


def has_top_level_order_by(sql: str) -> bool:
    """
    True if the statement itself (not a subquery or window) is ordered.

    String literals are blanked out first, then only text at parenthesis
    depth zero is searched.
    """
    stripped = _STRING_LITERAL.sub("''", sql)

    depth = 0
    top_level = []
    for char in stripped:
        if char == "(":
            depth += 1
            top_level.append(" ")
        elif char == ")":
            depth = max(depth - 1, 0)
            top_level.append(" ")
        else:
            top_level.append(char if depth == 0 else " ")

    return _ORDER_BY.search("".join(top_level)) is not None


@dataclass(frozen=True)
class QueryExample:
    """One illustrative query in the walkthrough."""

    name: str
    database: str
    sql: str
    tables: Tuple[str, ...]
    explanation: str
    expected_row_count: Optional[int] = None
    expected_columns: Optional[Tuple[str, ...]] = None
    requires_native_outer_join: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("Query example needs a name")
        if self.database not in DATABASE_NAMES:
            raise ValueError(f"Unknown database for {self.name}: {self.database}")
        if not self.sql or not self.sql.strip():
            raise ValueError(f"Query example {self.name} has no SQL")

        # Normalise the multi-line literals used in the catalog modules
        object.__setattr__(self, "sql", textwrap.dedent(self.sql).strip())
        object.__setattr__(self, "explanation", " ".join(self.explanation.split()))
        object.__setattr__(self, "tables", tuple(self.tables))
        if self.expected_columns is not None:
            object.__setattr__(self, "expected_columns", tuple(self.expected_columns))

    @property
    def ordered(self) -> bool:
        """Whether row order is fixed by an explicit ORDER BY."""
        return has_top_level_order_by(self.sql)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "database": self.database,
            "sql": self.sql,
            "tables": list(self.tables),
            "explanation": self.explanation,
            "expected_row_count": self.expected_row_count,
            "expected_columns": list(self.expected_columns) if self.expected_columns else None,
            "ordered": self.ordered,
            "requires_native_outer_join": self.requires_native_outer_join
        }
