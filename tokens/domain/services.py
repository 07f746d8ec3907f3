"""
Activation key domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity: key generation, key name rules and
entitlement defaulting.
"""
import uuid
from typing import Optional, Tuple

from core.domain.exceptions import (
    ActivationKeyExistsError,
    InvalidActivationKeyCharactersError,
)
from core.domain.value_objects import ServerGroupType
from servers.domain.server import Server

INVALID_KEY_CHARACTERS = (",", '"')


class ActivationKeyGenerator:
    """Domain service for activation key generation."""

    @staticmethod
    def generate() -> str:
        """
        Generate a random activation key.

        Returns:
            32 lowercase hex characters (a random 128-bit UUID without separators)
        """
        return uuid.uuid4().hex


class KeyNameValidator:
    """Domain service for activation key name validation."""

    @staticmethod
    def check_characters(key: str) -> Tuple[bool, Optional[str]]:
        """
        Check a key name for disallowed characters.

        Args:
            key: Candidate key string

        Returns:
            Tuple of (is_valid, error_message)
        """
        found = [char for char in INVALID_KEY_CHARACTERS if char in key]
        if found:
            return False, f"Key contains invalid characters: {' '.join(found)}"
        return True, None

    @staticmethod
    async def validate(
        key: str,
        repository: "ActivationKeyRepository",  # noqa: F821
    ) -> None:
        """
        Validate a key name against character rules and existing keys.

        Args:
            key: Candidate key string
            repository: Activation key repository

        Raises:
            InvalidActivationKeyCharactersError: If the key has a comma or double quote
            ActivationKeyExistsError: If a key with the same string is stored
        """
        is_valid, _ = KeyNameValidator.check_characters(key)
        if not is_valid:
            raise InvalidActivationKeyCharactersError(key, INVALID_KEY_CHARACTERS)

        if await repository.exists(key):
            raise ActivationKeyExistsError(key)


def normalize_key(key: Optional[str]) -> str:
    """Trim a caller supplied key and drop embedded spaces."""
    if not key:
        return ""
    return key.strip().replace(" ", "")


def sanitize_key(org_id: int, key: str, prefix_with_org: bool = False) -> str:
    """
    Apply org-scoped formatting to a key name.

    Args:
        org_id: Owning org id
        key: Candidate key string
        prefix_with_org: Prefix the key with "<org_id>-" unless already present

    Returns:
        Sanitized key string
    """
    key = key.strip()
    if prefix_with_org:
        prefix = f"{org_id}-"
        if not key.startswith(prefix):
            key = prefix + key
    return key


def derive_default_entitlements(
    server: Optional[Server],
    default: Optional[ServerGroupType] = None,
) -> Tuple[ServerGroupType, ...]:
    """
    Decide the entitlements a new activation key starts with.

    A key bound to a non-bootstrap server copies every group type the
    server is entitled to. Anything else (no server, a bootstrap server,
    a server with no entitlements) gets the single default entitlement.

    Args:
        server: Server the key is bound to, if any
        default: Fallback entitlement, enterprise_entitled when omitted

    Returns:
        Tuple of server group types
    """
    if default is None:
        default = ServerGroupType.enterprise_entitled()

    if server is not None and not server.is_bootstrap and server.entitled_group_types:
        return tuple(server.entitled_group_types)

    return (default,)
