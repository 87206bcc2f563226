"""Configuration module for the MLS ProAdmin API.

This module provides centralized configuration management, including directory
paths, database location, API server settings, logging and the built-in
super-admin account. All configuration values can be overridden via
environment variables.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory (holds the SQLite database and optional log files)
DATA_DIR_NAME = os.getenv("DATA_DIR_NAME", "data")
DATA_DIR = ROOT_DIR / DATA_DIR_NAME

# --- Database Configuration ---

DATABASE_FILE_NAME = "mls_proadmin.db"
DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR / DATABASE_FILE_NAME}"
)

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# CORS allowed origins (comma-separated list)
# Default includes local development addresses. For production, set via
# CORS_ALLOWED_ORIGINS environment variable.
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,"
    "http://127.0.0.1:3000",
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Optional log file; relative paths are resolved against DATA_DIR
LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
LOG_FILE_MAX_BYTES: int = int(os.getenv("LOG_FILE_MAX_BYTES", str(5 * 1024 * 1024)))
LOG_FILE_BACKUP_COUNT: int = int(os.getenv("LOG_FILE_BACKUP_COUNT", "3"))

# --- Authentication Configuration ---

# Header carrying the id of the logged-in user on requests that need a caller
USER_ID_HEADER: str = os.getenv("USER_ID_HEADER", "X-User-Id")

# The permanent super-admin account. It is recreated when missing and can
# never be deleted.
SUPER_ADMIN_ID: str = os.getenv("SUPER_ADMIN_ID", "user-001")
SUPER_ADMIN_USERNAME: str = os.getenv("SUPER_ADMIN_USERNAME", "MLS")
SUPER_ADMIN_PASSWORD: str = os.getenv("SUPER_ADMIN_PASSWORD", "2008")
SUPER_ADMIN_CREATED_AT = "2023-01-15T10:00:00Z"


def get_log_file_path() -> Optional[Path]:
    """Resolve LOG_FILE to an absolute path, or None when file logging is off."""
    if not LOG_FILE:
        return None
    path = Path(LOG_FILE)
    if not path.is_absolute():
        path = DATA_DIR / path
    return path
