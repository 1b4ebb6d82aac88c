"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BMI_DATA_FILE = "bmi_user_data.csv"
DEFAULT_US_NAVY_DATA_FILE = "us_user_data.csv"


def load_environment(env_path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file into the environment.

    Existing environment variables win over values from the file.

    Args:
        env_path: Explicit .env location, defaults to ./.env

    Returns:
        True if a file was found and loaded
    """
    path = env_path or Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path)


def get_data_dir() -> Optional[Path]:
    """
    Get the base directory for CSV record files.

    Returns:
        Path from HEALTH_DATA_DIR, or None to resolve against the cwd
    """
    data_dir = os.getenv("HEALTH_DATA_DIR")
    return Path(data_dir) if data_dir else None


def get_bmi_data_file() -> str:
    """Source holding records evaluated with the BMI method."""
    return os.getenv("HEALTH_BMI_DATA_FILE", DEFAULT_BMI_DATA_FILE)


def get_us_navy_data_file() -> str:
    """Source holding records evaluated with the US Navy method."""
    return os.getenv("HEALTH_US_NAVY_DATA_FILE", DEFAULT_US_NAVY_DATA_FILE)


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()
