"""
Test settings for ActivationKeyService.
"""

import os
import urllib.parse

from .base import *  # noqa: F403, F401

DEBUG = False

# Tests never start exporters or the Prometheus endpoint
os.environ.setdefault("OTEL_SDK_DISABLED", "true")

# Use PostgreSQL in CI (from DATABASE_URL), SQLite in-memory for local tests
DATABASE_URL = os.environ.get("DATABASE_URL")
if DATABASE_URL and DATABASE_URL.startswith("postgresql"):
    parsed = urllib.parse.urlparse(DATABASE_URL)
    db_name = parsed.path.lstrip("/")
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": db_name,
            "USER": parsed.username or "postgres",
            "PASSWORD": parsed.password or "",
            "HOST": parsed.hostname or "localhost",
            "PORT": parsed.port or 5432,
            "TEST": {
                "NAME": db_name + "_test",
            },
        }
    }
else:
    # Use in-memory SQLite for faster local tests
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

# Kickstart session bindings go to a per-process locmem cache
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "activation-key-tests",
    }
}

# Tests pin the registry options instead of reading the environment
ACTIVATION_KEYS = {
    **ACTIVATION_KEYS,  # noqa: F405
    "ORG_PREFIX_KEYS": False,
    "KICKSTART_SESSION_CACHE_TTL": 60,
}

# Disable logging during tests
LOGGING_CONFIG = None
