"""Configuration settings for sqlwalk."""

import os
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


DATABASE_NAMES = ("animals", "sales")


@dataclass
class DatabaseConfig:
    """Locations of the sample databases."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    animals_file: str = "animals.sqlite"
    sales_file: str = "sales.sqlite"
    read_only: bool = True

    def get_path(self, name: str) -> Path:
        """Resolve a logical database name ('animals', 'sales') to a file path."""
        if name == "animals":
            filename = self.animals_file
        elif name == "sales":
            filename = self.sales_file
        else:
            raise ValueError(f"Unknown database: {name} (expected one of {', '.join(DATABASE_NAMES)})")

        path = Path(filename)
        if path.is_absolute():
            return path
        return Path(self.data_dir) / path


@dataclass
class SqlWalkConfig:
    """Main configuration for the walkthrough runner."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    # Rendering
    max_display_rows: int = 20

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SqlWalkConfig":
        """Create config from a dictionary such as a parsed JSON config file."""
        data = dict(data)
        database = DatabaseConfig(**data.pop("database", {}))
        database.data_dir = Path(database.data_dir)
        if data.get("log_file"):
            data["log_file"] = Path(data["log_file"])
        return cls(database=database, **data)

    @classmethod
    def from_env(cls, **kwargs) -> "SqlWalkConfig":
        """Create config from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config = cls(**kwargs)

        # Database locations
        if os.getenv("SQLWALK_DATA_DIR"):
            config.database.data_dir = Path(os.getenv("SQLWALK_DATA_DIR"))
        if os.getenv("SQLWALK_ANIMALS_DB"):
            config.database.animals_file = os.getenv("SQLWALK_ANIMALS_DB")
        if os.getenv("SQLWALK_SALES_DB"):
            config.database.sales_file = os.getenv("SQLWALK_SALES_DB")

        # Rendering and logging
        if os.getenv("SQLWALK_MAX_ROWS"):
            config.max_display_rows = int(os.getenv("SQLWALK_MAX_ROWS"))
        if os.getenv("SQLWALK_LOG_LEVEL"):
            config.log_level = os.getenv("SQLWALK_LOG_LEVEL").upper()
        if os.getenv("SQLWALK_LOG_FILE"):
            config.log_file = Path(os.getenv("SQLWALK_LOG_FILE"))

        return config

    def validate(self):
        """Validate configuration settings."""
        if self.max_display_rows < 1:
            raise ValueError("max_display_rows must be at least 1")

        if self.log_level not in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            raise ValueError(f"Invalid log_level: {self.log_level}")

        if not self.database.animals_file or not self.database.sales_file:
            raise ValueError("Database file names cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "database": {
                "data_dir": str(self.database.data_dir),
                "animals_file": self.database.animals_file,
                "sales_file": self.database.sales_file,
                "read_only": self.database.read_only
            },
            "max_display_rows": self.max_display_rows,
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None
        }
