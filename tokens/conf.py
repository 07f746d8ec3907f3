"""
Activation key settings.

Values come from the ACTIVATION_KEYS Django setting, falling back to
the defaults below for missing entries.
"""
from typing import Any, Dict

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    "DEFAULT_NOTE": "None",
    "SERVER_KEY_PREFIX": "re-",
    "ORG_PREFIX_KEYS": False,
    "KICKSTART_SESSION_CACHE_TTL": 3600,
}


def activation_key_settings() -> Dict[str, Any]:
    """Return the effective ACTIVATION_KEYS configuration."""
    configured = getattr(settings, "ACTIVATION_KEYS", None) or {}
    return {**DEFAULTS, **configured}
