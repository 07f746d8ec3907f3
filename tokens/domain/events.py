"""
Activation key domain events.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ActivationKeyCreated(DomainEvent):
    """Event raised when an activation key is created."""

    key: str
    org_id: int
    token_id: int
    server_id: Optional[int] = None
    creator_id: Optional[int] = None


@dataclass(frozen=True, kw_only=True)
class ActivationKeyRemoved(DomainEvent):
    """
    Event raised when activation keys are deleted.

    Carries the removed key strings and the kickstart sessions they were
    bound to, so cached session bindings can be dropped.
    """

    keys: Tuple[str, ...] = field(default_factory=tuple)
    kickstart_session_ids: Tuple[int, ...] = field(default_factory=tuple)
    server_id: Optional[int] = None
    count: int = 0


@dataclass(frozen=True, kw_only=True)
class UniversalDefaultChanged(DomainEvent):
    """Event raised when an org's universal default token changes."""

    org_id: int
    token_id: int
    key: str
