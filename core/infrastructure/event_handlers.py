"""
Event handlers for domain events.

These handlers process domain events asynchronously for side effects
like audit logging and cache invalidation.
"""

import logging
from typing import Optional

from core.domain.events import DomainEvent, EventHandler
from tokens.application.services.activation_key_cache_service import ActivationKeyCacheService
from tokens.domain.events import (
    ActivationKeyCreated,
    ActivationKeyRemoved,
    UniversalDefaultChanged,
)

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event to the audit logger as structured fields.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )


class KickstartSessionCacheInvalidationHandler(EventHandler):
    """
    Event handler for cache invalidation.

    Drops cached kickstart session bindings of deleted activation keys.
    """

    def __init__(self, cache_service: Optional[ActivationKeyCacheService] = None):
        self.cache_service = cache_service or ActivationKeyCacheService()

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for cache invalidation.

        Args:
            event: ActivationKeyRemoved event
        """
        if not isinstance(event, ActivationKeyRemoved):
            return

        if event.kickstart_session_ids:
            await self.cache_service.invalidate_sessions(event.kickstart_session_ids)
            logger.info(
                "Invalidated %d kickstart session binding(s) (event: %s)",
                len(event.kickstart_session_ids),
                event.event_type,
            )


# Register event handlers
def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    cache_handler = KickstartSessionCacheInvalidationHandler()

    event_bus.subscribe(ActivationKeyCreated, audit_handler)
    event_bus.subscribe(ActivationKeyRemoved, audit_handler)
    event_bus.subscribe(UniversalDefaultChanged, audit_handler)

    event_bus.subscribe(ActivationKeyRemoved, cache_handler)

    logger.info("Event handlers registered")
