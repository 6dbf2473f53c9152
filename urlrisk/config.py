# config.py
"""
Runtime settings for the urlrisk service and CLI.
All values come from environment variables and can be overridden in deployment.
"""

import logging
import os

LOG_LEVEL = os.getenv("URLRISK_LOG_LEVEL", "INFO").upper()

# API key (unset: no key required)
API_KEY = os.getenv("URLRISK_API_KEY", None)

# Rate limiting; Redis storage is used when REDIS_URL is set
DEFAULT_RATE_LIMIT = os.getenv("URLRISK_RATE_LIMIT", "60 per minute")
CHECK_RATE_LIMIT = os.getenv("URLRISK_CHECK_RATE_LIMIT", "30 per minute")
REDIS_URL = os.getenv("REDIS_URL")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5050"))


def log_level() -> int:
    """Numeric logging level for LOG_LEVEL, INFO when the name is unknown."""
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO
