"""
ActivationKey and Token domain entities.

An activation key is a reusable registration credential. The settings it
applies to a registering server (channels, entitlements, config policy,
usage limit) live on the Token it wraps. Several keys may share a token:
the root key has no kickstart session, derivative keys are created per
provisioning session.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from core.domain.value_objects import ContactMethod, ServerGroupType

DEFAULT_DESCRIPTION = "None"
MAX_KEY_LENGTH = 128


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Token:
    """
    Token domain entity.

    Owns the channel subscription set, the entitlements and the
    config-deployment flag of an activation key.
    """

    id: Optional[int]
    org_id: int
    note: str = DEFAULT_DESCRIPTION
    usage_limit: Optional[int] = None
    disabled: bool = False
    deploy_configs: bool = False
    creator_id: Optional[int] = None
    server_id: Optional[int] = None
    base_channel_id: Optional[int] = None
    channel_ids: Tuple[int, ...] = field(default_factory=tuple)
    entitlements: Tuple[ServerGroupType, ...] = field(default_factory=tuple)
    contact_method: ContactMethod = field(default_factory=ContactMethod.default)
    activated_server_ids: Tuple[int, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate token entity."""
        if self.org_id is None:
            raise ValueError("Org ID is required")
        if self.usage_limit is not None and self.usage_limit < 0:
            raise ValueError("Usage limit cannot be negative")
        object.__setattr__(self, "channel_ids", tuple(self.channel_ids))
        object.__setattr__(self, "entitlements", tuple(self.entitlements))
        object.__setattr__(self, "activated_server_ids", tuple(self.activated_server_ids))

    @classmethod
    def create(
        cls,
        org_id: int,
        creator_id: Optional[int] = None,
        server_id: Optional[int] = None,
        note: str = DEFAULT_DESCRIPTION,
        usage_limit: Optional[int] = None,
    ) -> "Token":
        """
        Create a new, unsaved Token: enabled, not deploying configs,
        using the default contact method.
        """
        now = _utcnow()
        return cls(
            id=None,
            org_id=org_id,
            creator_id=creator_id,
            server_id=server_id,
            note=note,
            usage_limit=usage_limit,
            disabled=False,
            deploy_configs=False,
            contact_method=ContactMethod.default(),
            created_at=now,
            updated_at=now,
        )

    def add_channel(self, channel_id: int) -> "Token":
        if channel_id in self.channel_ids:
            return self
        return replace(self, channel_ids=self.channel_ids + (channel_id,))

    def set_base_channel(self, channel_id: int) -> "Token":
        """Record the base channel and subscribe the token to it."""
        token = self.add_channel(channel_id)
        return replace(token, base_channel_id=channel_id)

    def add_entitlement(self, group_type: ServerGroupType) -> "Token":
        if group_type in self.entitlements:
            return self
        return replace(self, entitlements=self.entitlements + (group_type,))

    def add_entitlements(self, group_types: Iterable[ServerGroupType]) -> "Token":
        token = self
        for group_type in group_types:
            token = token.add_entitlement(group_type)
        return token

    def with_contact_method(self, contact_method: ContactMethod) -> "Token":
        return replace(self, contact_method=contact_method)

    def with_deploy_configs(self, deploy_configs: bool) -> "Token":
        return replace(self, deploy_configs=deploy_configs)

    @property
    def entitlement_labels(self) -> Tuple[str, ...]:
        return tuple(group_type.label for group_type in self.entitlements)


@dataclass(frozen=True)
class ActivationKey:
    """
    ActivationKey domain entity.

    Wraps exactly one Token. Attribute accessors for the token's settings
    are provided so callers rarely need to reach through.
    """

    id: Optional[int]
    key: str
    token: Token
    kickstart_session_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate activation key entity."""
        if not self.key or len(self.key.strip()) == 0:
            raise ValueError("Activation key cannot be empty")
        if len(self.key) > MAX_KEY_LENGTH:
            raise ValueError("Activation key too long")
        if self.token is None:
            raise ValueError("Token is required")

    @classmethod
    def create(
        cls,
        key: str,
        token: Token,
        kickstart_session_id: Optional[int] = None,
    ) -> "ActivationKey":
        """
        Create a new, unsaved ActivationKey entity.

        Args:
            key: Final key string
            token: Token carrying the key's settings
            kickstart_session_id: Provisioning session for derivative keys

        Returns:
            ActivationKey entity instance
        """
        now = _utcnow()
        return cls(
            id=None,
            key=key,
            token=token,
            kickstart_session_id=kickstart_session_id,
            created_at=now,
            updated_at=now,
        )

    @property
    def org_id(self) -> int:
        return self.token.org_id

    @property
    def note(self) -> str:
        return self.token.note

    @property
    def usage_limit(self) -> Optional[int]:
        return self.token.usage_limit

    @property
    def disabled(self) -> bool:
        return self.token.disabled

    @property
    def deploy_configs(self) -> bool:
        return self.token.deploy_configs

    @property
    def server_id(self) -> Optional[int]:
        return self.token.server_id

    @property
    def creator_id(self) -> Optional[int]:
        return self.token.creator_id

    @property
    def base_channel_id(self) -> Optional[int]:
        return self.token.base_channel_id

    @property
    def entitlements(self) -> Tuple[ServerGroupType, ...]:
        return self.token.entitlements

    @property
    def channel_ids(self) -> Tuple[int, ...]:
        return self.token.channel_ids

    @property
    def contact_method(self) -> ContactMethod:
        return self.token.contact_method

    @property
    def is_root(self) -> bool:
        """True for the token's own key (not a per-session derivative)."""
        return self.kickstart_session_id is None
