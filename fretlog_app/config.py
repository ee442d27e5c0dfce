# File: fretlog_app/config.py
# Application configuration loaded from the environment (.env supported).

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    """Cấu hình ứng dụng Fretlog."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')  # None = console only
    LOG_JSON = _env_bool('LOG_JSON')

    # CAGED drill scoring baseline (seconds to play all five shapes)
    CAGED_TARGET_TIME_SECONDS = _env_int('CAGED_TARGET_TIME_SECONDS', 20)

    # Upper bound on records accepted in a single API payload
    MAX_RECORDS_PER_REQUEST = _env_int('MAX_RECORDS_PER_REQUEST', 5000)
