# /academic-records/records/core/config.py

"""
Central configuration for the records manager.

Values come from the environment (optionally a local `.env` file loaded with
python-dotenv). Numeric limits are validated on construction so a broken
configuration stops the program before any data is loaded.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"FATAL ERROR: {name} must be an integer, got '{raw}'.")
    if value <= 0:
        raise ValueError(f"FATAL ERROR: {name} must be positive, got {value}.")
    return value


class Settings:
    """
    Runtime settings. Buffer sizes mirror fixed-width text fields, so the
    longest storable name is NAME_SIZE - 1 characters.
    """

    def __init__(self):
        self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./dados_sistema.db")
        self.MAX_CLASSES = _int_from_env("MAX_CLASSES", 20)
        self.MAX_STUDENTS = _int_from_env("MAX_STUDENTS", 100)
        self.NAME_SIZE = _int_from_env("NAME_SIZE", 50)
        self.RA_SIZE = _int_from_env("RA_SIZE", 10)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def name_max_length(self) -> int:
        return self.NAME_SIZE - 1

    @property
    def ra_max_length(self) -> int:
        return self.RA_SIZE - 1


settings = Settings()
