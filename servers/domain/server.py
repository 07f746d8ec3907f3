"""
Server domain entity.

A managed server carries the entitlements (server group types) it is
currently entitled to. A server holding the bootstrap entitlement is in
a minimal, pre-entitlement state.
"""
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from core.domain.value_objects import ServerGroupType


@dataclass(frozen=True)
class Server:
    """
    Server domain entity.

    This is an immutable value object; state changes return new instances.
    """

    id: Optional[int]
    org_id: int
    name: str
    entitled_group_types: Tuple[ServerGroupType, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate server entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Server name cannot be empty")
        if self.org_id is None:
            raise ValueError("Org ID is required")
        object.__setattr__(self, "entitled_group_types", tuple(self.entitled_group_types))

    @classmethod
    def create(
        cls,
        org_id: int,
        name: str,
        entitlements: Iterable[ServerGroupType] = (),
    ) -> "Server":
        """
        Create a new, unsaved Server entity.

        Args:
            org_id: Owning org id
            name: Server name
            entitlements: Server group types the server is entitled to

        Returns:
            Server entity instance
        """
        return cls(
            id=None,
            org_id=org_id,
            name=name.strip(),
            entitled_group_types=tuple(dict.fromkeys(entitlements)),
        )

    @property
    def is_bootstrap(self) -> bool:
        """True when the server holds the bootstrap entitlement."""
        return any(group_type.is_bootstrap for group_type in self.entitled_group_types)

    def add_entitlement(self, group_type: ServerGroupType) -> "Server":
        if group_type in self.entitled_group_types:
            return self
        return replace(
            self, entitled_group_types=self.entitled_group_types + (group_type,)
        )
