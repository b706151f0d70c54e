# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "en")
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_PROJECT_DURATION_DAYS = int(os.getenv("PROJECT_DURATION_DAYS", "180"))


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Research Assistant"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Research Assistant"

    # Language (only "en" ships translations)
    APP_LANGUAGE: str = _APP_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "wizard.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_CONSOLE_LEVEL: str = _LOG_LEVEL

    # Project Wizard
    # Question must be strictly longer than this once trimmed
    QUESTION_MIN_LENGTH: int = 10
    # "Six months" from the start date, counted as 6 x 30 days
    DEFAULT_PROJECT_DURATION_DAYS: int = _PROJECT_DURATION_DAYS

    # UI Settings
    WINDOW_MIN_WIDTH: int = 880
    WINDOW_MIN_HEIGHT: int = 640
