"""
Free text scrubbing for user supplied values stored and later rendered.
"""
from typing import Optional

from django.utils.html import escape


def scrub(value: Optional[str]) -> Optional[str]:
    """
    Trim a string and escape HTML special characters.

    Args:
        value: Raw text, may be None

    Returns:
        Scrubbed text, or None when value is None
    """
    if value is None:
        return None
    return str(escape(value.strip()))
