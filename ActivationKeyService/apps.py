"""
App configuration for Activation Key Service.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

# Management commands that never serve requests
SKIP_SETUP_COMMANDS = [
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "check",
    "createsuperuser",
]


class ActivationKeyServiceConfig(AppConfig):
    """App configuration for ActivationKeyService."""

    name = "ActivationKeyService"
    verbose_name = "Activation Key Service"

    def ready(self):
        """Called when Django starts."""
        self.register_event_handlers()

        if len(sys.argv) > 1 and sys.argv[1] in SKIP_SETUP_COMMANDS:
            return

        # Django's reloader imports the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        if os.environ.get("OTEL_SDK_DISABLED", "").lower() == "true":
            logger.info("OpenTelemetry disabled, skipping observability setup")
            return

        self.setup_observability()

    def setup_observability(self):
        """Setup observability after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Failed to setup OpenTelemetry: %s", e, exc_info=True)

    def register_event_handlers(self):
        """Register event handlers after apps are ready."""
        from core.infrastructure.event_handlers import register_event_handlers as register

        register()
