"""Shared fixtures: small animals.sqlite and sales.sqlite files built per test."""

from itertools import cycle, islice, product
from pathlib import Path

import pandas as pd
import pytest

from sqlwalk.config.settings import DatabaseConfig
from sqlwalk.data.loader import build_database
from sqlwalk.database.manager import ConnectionManager, open_database


ANIMAL_TYPES = ["Dog", "Cat", "Bird", "Other", "Livestock"]
SEXES = ["Intact Male", "Intact Female", "Neutered Male", "Spayed Female", "Unknown"]
AGES = (
    ["1 year"] + [f"{n} years" for n in range(2, 11)]
    + ["1 month"] + [f"{n} months" for n in range(2, 12)]
    + ["1 week"]
)
BREEDS = ["Pit Bull Mix", "Domestic Shorthair Mix", "Labrador Retriever Mix", "Chihuahua Shorthair"]
INTAKE_TYPES = ["Stray", "Owner Surrender", "Public Assist", "Wildlife", "Euthanasia Request"]
CONDITIONS = ["Normal", "Injured", "Sick", "Aged"]

DISTINCT_PROFILES = 539
DUPLICATE_INTAKES = 20


def make_intakes() -> pd.DataFrame:
    profiles = list(islice(product(ANIMAL_TYPES, SEXES, AGES), DISTINCT_PROFILES))
    # Repeat some profiles so DISTINCT has duplicates to remove
    profiles += profiles[:DUPLICATE_INTAKES]

    rows = []
    for i, (animal_type, sex, age) in enumerate(profiles):
        rows.append({
            "animal_id": f"A{i:06d}",
            "name": None if i % 7 == 0 else f"Pet {i}",
            "datetime": f"{2014 + i % 3}-{1 + i % 12:02d}-{1 + i % 28:02d} 10:30:00",
            "found_location": f"{100 + i} Congress Ave in Austin (TX)",
            "intake_type": INTAKE_TYPES[i % len(INTAKE_TYPES)],
            "intake_condition": CONDITIONS[i % len(CONDITIONS)],
            "animal_type": animal_type,
            "sex_upon_intake": sex,
            "age_upon_intake": age,
            "breed": BREEDS[i % len(BREEDS)],
            "color": "Black/White" if i % 2 else "Brown Tabby",
        })
    return pd.DataFrame(rows)


TEAMS = [
    ("Darcel Schlecht", "Melvin Marxen", "Central"),
    ("Vicki Laflamme", "Celia Rouche", "West"),
    ("Anna Snelling", "Dustin Brinkmann", "Central"),
    ("Kary Hendrixson", "Celia Rouche", "West"),
    ("Moses Frase", "Cara Losch", "East"),
]

# agent -> (won, lost, engaging, prospecting)
DEALS = {
    "Darcel Schlecht": (250, 10, 0, 0),
    "Vicki Laflamme": (210, 0, 5, 0),
    "Anna Snelling": (150, 0, 0, 0),
    "Kary Hendrixson": (40, 0, 0, 3),
    "Moses Frase": (5, 2, 0, 0),
}
TOP_AGENTS = {"Darcel Schlecht", "Vicki Laflamme"}

PRODUCTS = [("GTX Basic", "GTX", 550), ("MG Special", "MG", 55), ("GTX Pro", "GTX", 4821)]

ACCOUNT_COLUMNS = ["account", "sector", "year_established", "revenue", "employees",
                   "office_location", "subsidiary_of"]
ACCOUNTS = [
    ("Acme Corporation", "technolgy", 1996, 1100.04, 4822, "United States", None),
    ("Betasoloin", "medical", 1999, 251.41, 495, "United States", None),
    ("Cancity", "retail", 2001, 718.62, 2448, "United States", None),
    ("Dontechi", "software", 1982, 4618.0, 10083, "United States", None),
    ("Kan-code", "software", 1982, 11698.03, 34288, "Norway", None),
    ("Zoomit", "entertainment", 1992, 324.19, 978, "United States", None),
]
INTL_ACCOUNTS = [
    ("Kan-code", "software", 1982, 11698.03, 34288, "Norway", None),
    ("Rangreen", "finance", 1987, 167.89, 1002, "Panama", None),
]
# Zoomit never appears in the pipeline
PIPELINE_ACCOUNTS = ["Acme Corporation", "Betasoloin", "Cancity", "Dontechi", "Kan-code"]


def make_pipeline() -> pd.DataFrame:
    rows = []
    accounts = cycle(PIPELINE_ACCOUNTS)
    products = cycle(PRODUCTS)
    n = 0
    for agent, (won, lost, engaging, prospecting) in DEALS.items():
        stages = (["Won"] * won + ["Lost"] * lost
                  + ["Engaging"] * engaging + ["Prospecting"] * prospecting)
        for stage in stages:
            n += 1
            product_name, _, price = next(products)
            if stage == "Won":
                close_value = 40 + (n * 37) % price
            elif stage == "Lost":
                close_value = 0
            else:
                close_value = None
            rows.append({
                "opportunity_id": f"OPP{n:05d}",
                "sales_agent": agent,
                "product": product_name,
                "account": None if stage == "Prospecting" else next(accounts),
                "deal_stage": stage,
                "engage_date": f"2017-{1 + n % 12:02d}-{1 + n % 28:02d}",
                "close_date": None if stage in ("Engaging", "Prospecting") else f"2017-12-{1 + n % 28:02d}",
                "close_value": close_value,
            })
    return pd.DataFrame(rows)


def sales_tables() -> dict:
    return {
        "sales_pipeline": make_pipeline(),
        "sales_teams": pd.DataFrame(TEAMS, columns=["sales_agent", "manager", "regional_office"]),
        "accounts": pd.DataFrame(ACCOUNTS, columns=ACCOUNT_COLUMNS),
        "intl_accounts": pd.DataFrame(INTL_ACCOUNTS, columns=ACCOUNT_COLUMNS),
        "products": pd.DataFrame(PRODUCTS, columns=["product", "series", "sales_price"]),
    }


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """A data directory holding both sample databases."""
    build_database(tmp_path / "animals.sqlite", {"austin_animal_center_intakes": make_intakes()})
    build_database(tmp_path / "sales.sqlite", sales_tables())
    return tmp_path


@pytest.fixture
def animals_path(data_dir) -> Path:
    return data_dir / "animals.sqlite"


@pytest.fixture
def sales_path(data_dir) -> Path:
    return data_dir / "sales.sqlite"


@pytest.fixture
def manager(data_dir) -> ConnectionManager:
    return ConnectionManager(DatabaseConfig(data_dir=data_dir))


@pytest.fixture
def animals(animals_path):
    with open_database(animals_path) as handle:
        yield handle


@pytest.fixture
def sales(sales_path):
    with open_database(sales_path) as handle:
        yield handle
