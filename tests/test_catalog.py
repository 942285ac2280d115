"""Tests for the query catalog."""

from dataclasses import FrozenInstanceError

import pytest

from sqlwalk.catalog import CATALOG, QueryExample, examples_for, get_example, has_top_level_order_by
from sqlwalk.data.validators import required_tables


def test_catalog_names_are_unique():
    names = [example.name for example in CATALOG]
    assert len(names) == len(set(names))


def test_catalog_runs_animals_before_sales():
    databases = [example.database for example in CATALOG]
    assert databases == sorted(databases)
    assert CATALOG == examples_for("animals") + examples_for("sales")


def test_every_example_is_documented():
    for example in CATALOG:
        assert example.explanation
        assert example.tables
        assert not example.sql.startswith((" ", "\n"))


def test_get_example():
    example = get_example("animals_distinct_profile")
    assert example.database == "animals"
    assert example.expected_row_count == 539
    with pytest.raises(KeyError):
        get_example("animals_missing")


def test_examples_are_immutable():
    example = get_example("sales_union")
    with pytest.raises(FrozenInstanceError):
        example.sql = "SELECT 1"


def test_example_validation():
    with pytest.raises(ValueError):
        QueryExample(name="x", database="inventory", sql="SELECT 1", tables=(), explanation="")
    with pytest.raises(ValueError):
        QueryExample(name="x", database="sales", sql="   ", tables=(), explanation="")


def test_example_normalises_text():
    example = QueryExample(
        name="demo",
        database="sales",
        sql="""
            SELECT account
            FROM accounts
        """,
        tables=["accounts"],
        explanation="""
            Two
            lines.
        """,
        expected_columns=["account"],
    )
    assert example.sql == "SELECT account\nFROM accounts"
    assert example.explanation == "Two lines."
    assert example.tables == ("accounts",)
    assert example.expected_columns == ("account",)
    assert example.to_dict()["ordered"] is False


@pytest.mark.parametrize("sql, expected", [
    ("SELECT * FROM t ORDER BY a", True),
    ("SELECT * FROM t order  by a DESC", True),
    ("SELECT a FROM t UNION SELECT a FROM u ORDER BY a", True),
    ("SELECT * FROM t", False),
    ("SELECT * FROM (SELECT * FROM t ORDER BY a LIMIT 5)", False),
    ("SELECT a, ROW_NUMBER() OVER (ORDER BY a) FROM t", False),
    ("SELECT 'order by' AS label FROM t", False),
    ("SELECT * FROM t WHERE name = 'it''s' ORDER BY name", True),
])
def test_has_top_level_order_by(sql, expected):
    assert has_top_level_order_by(sql) is expected


def test_ordered_flags():
    assert get_example("animals_order_by").ordered
    assert get_example("sales_union").ordered
    assert not get_example("animals_distinct_profile").ordered
    assert not get_example("sales_union_all").ordered
    assert get_example("sales_subquery_where").ordered
    assert not get_example("sales_subquery_from").ordered


def test_native_outer_joins_have_workarounds():
    native = [e for e in CATALOG if e.requires_native_outer_join]
    assert {e.name for e in native} == {"sales_right_join_native", "sales_full_join_native"}
    workarounds = {
        "sales_right_join_native": "sales_right_join_swapped",
        "sales_full_join_native": "sales_full_join_emulated",
    }
    for example in native:
        workaround = get_example(workarounds[example.name])
        assert not workaround.requires_native_outer_join
        assert workaround.expected_columns == example.expected_columns


def test_required_tables():
    assert required_tables("animals") == ["austin_animal_center_intakes"]
    assert required_tables("sales") == ["accounts", "intl_accounts", "products", "sales_pipeline", "sales_teams"]
