"""Configuration management for sqlwalk."""

from .settings import SqlWalkConfig, DatabaseConfig
from .logging_config import setup_logging

__all__ = ["SqlWalkConfig", "DatabaseConfig", "setup_logging"]
