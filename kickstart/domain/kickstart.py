"""
Kickstart domain entities.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional, Tuple


@dataclass(frozen=True)
class KickstartData:
    """
    A provisioning profile.

    default_token_ids lists the activation key tokens a server provisioned
    from this profile is registered with.
    """

    id: Optional[int]
    org_id: int
    label: str
    active: bool = True
    default_token_ids: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate kickstart profile."""
        if not self.label or len(self.label.strip()) == 0:
            raise ValueError("Kickstart label cannot be empty")
        if self.org_id is None:
            raise ValueError("Org ID is required")
        object.__setattr__(self, "default_token_ids", tuple(self.default_token_ids))

    @classmethod
    def create(cls, org_id: int, label: str) -> "KickstartData":
        return cls(id=None, org_id=org_id, label=label.strip())

    def add_default_token(self, token_id: int) -> "KickstartData":
        """
        Associate an activation key token with this profile.

        Args:
            token_id: Token id of the activation key

        Returns:
            New KickstartData instance including the token
        """
        if token_id in self.default_token_ids:
            return self
        return replace(self, default_token_ids=self.default_token_ids + (token_id,))


@dataclass(frozen=True)
class KickstartSession:
    """One provisioning run of a kickstart profile."""

    id: Optional[int]
    kickstart_data_id: int
    org_id: int
    server_id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if self.kickstart_data_id is None:
            raise ValueError("Kickstart profile ID is required")

    @classmethod
    def create(
        cls, kickstart_data_id: int, org_id: int, server_id: Optional[int] = None
    ) -> "KickstartSession":
        return cls(
            id=None,
            kickstart_data_id=kickstart_data_id,
            org_id=org_id,
            server_id=server_id,
            created_at=datetime.now(timezone.utc),
        )
