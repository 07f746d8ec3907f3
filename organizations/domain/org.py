"""
Org domain entity.

An organization owns activation keys, servers and channels. It may name
one activation key token as its universal default, used when a server
registers without supplying a key.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Org:
    """
    Org domain entity.

    This is an immutable value object; state changes return new instances.
    """

    id: Optional[int]
    name: str
    default_token_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate org entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Organization name cannot be empty")
        if len(self.name) > 128:
            raise ValueError("Organization name too long")

    @classmethod
    def create(cls, name: str) -> "Org":
        """
        Create a new, unsaved Org entity.

        Args:
            name: Organization display name

        Returns:
            Org entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(id=None, name=name.strip(), created_at=now, updated_at=now)

    def set_universal_default(self, token_id: int) -> "Org":
        """
        Make the given token the org-wide default.

        Args:
            token_id: Token id of the activation key to promote

        Returns:
            New Org instance with the default token set
        """
        return replace(
            self, default_token_id=token_id, updated_at=datetime.now(timezone.utc)
        )

    def is_universal_default(self, token_id: Optional[int]) -> bool:
        return token_id is not None and self.default_token_id == token_id
