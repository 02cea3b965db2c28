"""
Settings read from the environment. A .env file in the working directory is loaded too.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .descriptions import DescriptionTables, load_tables

# Load environment variables
load_dotenv()

TABLES_ENV = "WEBSPEECH_TABLES"
LOG_LEVEL_ENV = "WEBSPEECH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_tables(path: Optional[str] = None) -> DescriptionTables:
    """
    Resolve the description tables to use.

    Args:
        path: JSON overrides file (falls back to the WEBSPEECH_TABLES env var)

    Returns:
        Built-in tables, with the overrides file merged on top if one is set
    """
    path = path or os.getenv(TABLES_ENV)
    if path:
        return load_tables(path)
    return DescriptionTables.default()


def get_log_level(verbose: bool = False) -> int:
    """Logging level from --verbose or WEBSPEECH_LOG_LEVEL."""
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: {name}")
    return level
