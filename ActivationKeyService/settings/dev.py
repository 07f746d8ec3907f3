"""
Development settings for ActivationKeyService.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Database - Use PostgreSQL in Docker, SQLite for local development
# Override with environment variable DB_ENGINE=sqlite for SQLite
if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

# Short-lived kickstart session bindings make cache behaviour easy to watch
ACTIVATION_KEYS = {
    **ACTIVATION_KEYS,  # noqa: F405
    "KICKSTART_SESSION_CACHE_TTL": int(os.environ.get("KICKSTART_SESSION_CACHE_TTL", "60")),
}

LOGGING["loggers"]["tokens"]["level"] = "DEBUG"  # noqa: F405
