"""
Configuration settings for the web calculator.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory
env_file = Path.cwd() / ".env"
if env_file.exists():
    load_dotenv(env_file)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


# Server
HOST = os.getenv("WEB_CALCULATOR_HOST", "127.0.0.1")
PORT = _env_int("WEB_CALCULATOR_PORT", 5000)
DEBUG = _env_bool("WEB_CALCULATOR_DEBUG", False)

# Logging
LOG_LEVEL = os.getenv("WEB_CALCULATOR_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
