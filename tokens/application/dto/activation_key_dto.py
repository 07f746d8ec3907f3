"""
Activation key DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from kickstart.domain.kickstart import KickstartData
from tokens.domain.activation_key import ActivationKey


@dataclass
class ActivationKeyDTO:
    """DTO for activation key information."""

    key: str
    token_id: int
    org_id: int
    note: str
    usage_limit: Optional[int]
    disabled: bool
    deploy_configs: bool
    server_id: Optional[int]
    base_channel_id: Optional[int]
    channel_ids: List[int]
    entitlements: List[str]
    contact_method: str
    kickstart_session_id: Optional[int]
    universal_default: bool
    created_at: Optional[datetime]

    @classmethod
    def from_entity(
        cls, activation_key: ActivationKey, universal_default: bool = False
    ) -> "ActivationKeyDTO":
        return cls(
            key=activation_key.key,
            token_id=activation_key.token.id,
            org_id=activation_key.org_id,
            note=activation_key.note,
            usage_limit=activation_key.usage_limit,
            disabled=activation_key.disabled,
            deploy_configs=activation_key.deploy_configs,
            server_id=activation_key.server_id,
            base_channel_id=activation_key.base_channel_id,
            channel_ids=list(activation_key.channel_ids),
            entitlements=list(activation_key.token.entitlement_labels),
            contact_method=activation_key.contact_method.label,
            kickstart_session_id=activation_key.kickstart_session_id,
            universal_default=universal_default,
            created_at=activation_key.created_at,
        )


@dataclass
class KickstartProfileDTO:
    """DTO for a kickstart profile that uses an activation key."""

    id: int
    label: str
    org_id: int
    active: bool

    @classmethod
    def from_entity(cls, profile: KickstartData) -> "KickstartProfileDTO":
        return cls(
            id=profile.id,
            label=profile.label,
            org_id=profile.org_id,
            active=profile.active,
        )
