"""
config.py
Application settings (environment overrides) and logging setup.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

DB_FILE = Path(os.environ.get("GYM_DB_FILE", Path(__file__).with_name("gym.db")))
BCRYPT_ROUNDS = int(os.environ.get("GYM_BCRYPT_ROUNDS", "12"))
LOG_LEVEL = os.environ.get("GYM_LOG_LEVEL", "INFO").upper()

PASSWORD_LENGTH = 10
MIN_PASSWORD_LENGTH = 4
EXPIRING_WINDOW_DAYS = 7
RECENT_LOG_LIMIT = 50
DEFAULT_PAGE_SIZE = 50
REVENUE_MONTHS = 6


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
