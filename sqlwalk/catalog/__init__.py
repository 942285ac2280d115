"""The ordered catalog of walkthrough queries"""

from typing import Tuple

from .examples import QueryExample, has_top_level_order_by
from .animals import ANIMALS_EXAMPLES
from .sales import SALES_EXAMPLES


# Walkthrough order: the animals database first, then sales
CATALOG: Tuple[QueryExample, ...] = ANIMALS_EXAMPLES + SALES_EXAMPLES

_BY_NAME = {example.name: example for example in CATALOG}
if len(_BY_NAME) != len(CATALOG):
    raise RuntimeError("Duplicate query example names in catalog")


def get_example(name: str) -> QueryExample:
    """Look up one example by name. Raises KeyError for unknown names."""
    return _BY_NAME[name]


def examples_for(database: str) -> Tuple[QueryExample, ...]:
    """Examples targeting one database, in walkthrough order."""
    return tuple(example for example in CATALOG if example.database == database)


__all__ = [
    "CATALOG",
    "QueryExample",
    "get_example",
    "examples_for",
    "has_top_level_order_by",
]
