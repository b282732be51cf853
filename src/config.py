"""Configuration module for the Blog Pessoal API.

This module provides centralized configuration management, including directory
paths, database settings, API server settings and authentication defaults.
All configuration values can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory name
DATA_DIR_NAME = "data"
DATA_DIR = ROOT_DIR / DATA_DIR_NAME

# --- Database Configuration ---

DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR}/blogpessoal.db"
)

# Echo SQL statements (set to "true" for debugging)
DATABASE_ECHO: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8080"))

# CORS allowed origins (comma-separated list). "*" allows any origin.
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv("CORS_ALLOWED_ORIGINS", "*")
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Authentication Configuration ---

# Bcrypt cost factor (higher = more secure but slower)
BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

# Require HTTP Basic credentials on every route except login and registration
REQUIRE_AUTH: bool = os.getenv("REQUIRE_AUTH", "true").lower() == "true"
