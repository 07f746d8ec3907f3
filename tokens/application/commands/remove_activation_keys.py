"""
Commands to delete activation keys.
"""
from dataclasses import dataclass

from tokens.domain.activation_key import ActivationKey


@dataclass
class RemoveActivationKeyCommand:
    """Command to delete one activation key and its token."""

    activation_key: ActivationKey


@dataclass
class RemoveServerActivationKeysCommand:
    """Command to delete every activation key bound to a server."""

    server_id: int
