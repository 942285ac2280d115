"""Tests for configuration loading."""

from pathlib import Path

import pytest

from sqlwalk.config.settings import DatabaseConfig, SqlWalkConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ["SQLWALK_DATA_DIR", "SQLWALK_ANIMALS_DB", "SQLWALK_SALES_DB",
                 "SQLWALK_MAX_ROWS", "SQLWALK_LOG_LEVEL", "SQLWALK_LOG_FILE"]:
        # setenv first so monkeypatch also undoes anything load_dotenv sets
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep a stray .env in the working directory out of the way
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = SqlWalkConfig()
    config.validate()
    assert config.database.get_path("animals") == Path("data") / "animals.sqlite"
    assert config.database.get_path("sales") == Path("data") / "sales.sqlite"
    assert config.database.read_only


def test_absolute_file_ignores_data_dir(tmp_path):
    db = DatabaseConfig(data_dir=Path("data"), sales_file=str(tmp_path / "crm.sqlite"))
    assert db.get_path("sales") == tmp_path / "crm.sqlite"


def test_unknown_database_name():
    with pytest.raises(ValueError, match="Unknown database"):
        DatabaseConfig().get_path("inventory")


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SQLWALK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SQLWALK_SALES_DB", "crm.sqlite")
    monkeypatch.setenv("SQLWALK_MAX_ROWS", "5")
    monkeypatch.setenv("SQLWALK_LOG_LEVEL", "debug")

    config = SqlWalkConfig.from_env()

    assert config.database.get_path("sales") == tmp_path / "crm.sqlite"
    assert config.database.get_path("animals") == tmp_path / "animals.sqlite"
    assert config.max_display_rows == 5
    assert config.log_level == "DEBUG"
    config.validate()


def test_from_env_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("SQLWALK_ANIMALS_DB=shelter.sqlite\n")
    config = SqlWalkConfig.from_env()
    assert config.database.animals_file == "shelter.sqlite"


def test_from_dict_round_trip(tmp_path):
    original = SqlWalkConfig(
        database=DatabaseConfig(data_dir=tmp_path, animals_file="a.sqlite"),
        max_display_rows=7,
        log_file=tmp_path / "walk.log",
    )
    restored = SqlWalkConfig.from_dict(original.to_dict())
    assert restored == original


@pytest.mark.parametrize("changes", [
    {"max_display_rows": 0},
    {"log_level": "LOUD"},
])
def test_validate_rejects_bad_values(changes):
    config = SqlWalkConfig(**changes)
    with pytest.raises(ValueError):
        config.validate()
