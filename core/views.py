"""
Health and readiness endpoints.

Each check returns (healthy, error). The single-dependency endpoints
report one check; /ready/ reports all of them and answers 503 unless
every check passes.
"""

import logging
from typing import Optional, Tuple

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from tokens.infrastructure.models import ActivationKey as ActivationKeyModel

logger = logging.getLogger(__name__)

SERVICE_NAME = "activation-key-service"

Check = Tuple[bool, Optional[str]]


def check_database() -> Check:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        return False, str(e)
    return True, None


def check_cache() -> Check:
    try:
        cache.set("health_check", "ok", 10)
        if cache.get("health_check") != "ok":
            return False, "cache did not return the stored value"
    except Exception as e:  # pylint: disable=broad-exception-caught
        return False, str(e)
    return True, None


def check_activation_keys() -> Check:
    """The activation key table exists and can be queried."""
    try:
        ActivationKeyModel.objects.exists()  # pylint: disable=no-member
    except DatabaseError as e:
        return False, str(e)
    return True, None


def _single_check_response(name: str, check: Check) -> JsonResponse:
    healthy, error = check
    body = {"status": "healthy" if healthy else "unhealthy", name: healthy}
    if error:
        logger.warning("Health check %s failed: %s", name, error)
        body["error"] = error
    return JsonResponse(body, status=200 if healthy else 503)


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Liveness: the process is up and serving requests."""

    def get(self, _request):
        return JsonResponse({"status": "healthy", "service": SERVICE_NAME})


@method_decorator(csrf_exempt, name="dispatch")
class HealthDBView(View):
    def get(self, _request):
        return _single_check_response("database", check_database())


@method_decorator(csrf_exempt, name="dispatch")
class HealthCacheView(View):
    def get(self, _request):
        return _single_check_response("cache", check_cache())


@method_decorator(csrf_exempt, name="dispatch")
class ReadyView(View):
    """Readiness: the database, the cache and the key registry tables answer."""

    checks = {
        "database": check_database,
        "cache": check_cache,
        "activation_keys": check_activation_keys,
    }

    def get(self, _request):
        results = {name: check()[0] for name, check in self.checks.items()}
        ready = all(results.values())
        return JsonResponse(
            {"status": "ready" if ready else "not_ready", "checks": results},
            status=200 if ready else 503,
        )
