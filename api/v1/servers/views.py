"""
Server activation key API views.

These endpoints are used when a server is re-registered or deregistered:
- List the keys bound to a server, or the keys it was activated with
- Delete every key bound to a server
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.activation_keys.serializers import (
    ActivationKeyDTOSerializer,
    RemoveActivationKeysResponseSerializer,
)
from core.domain.exceptions import ServerNotFoundError
from core.instrumentation import Status, StatusCode, get_tracer
from servers.infrastructure.repositories.django_server_repository import DjangoServerRepository
from tokens.application.dto.activation_key_dto import ActivationKeyDTO
from tokens.application.services.activation_key_registry import activation_key_registry

_server_repo = DjangoServerRepository()

tracer = get_tracer(__name__)


class ServerActivationKeysView(APIView):
    """View for the activation keys of a server."""

    @extend_schema(
        operation_id="list_server_activation_keys",
        summary="List Server Activation Keys",
        description=(
            "List the re-registration keys bound to a server. With activated=true, "
            "list the keys the server was registered with instead."
        ),
        tags=["Servers"],
        parameters=[
            OpenApiParameter(
                name="activated",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Return activation history instead of bound keys",
            ),
        ],
        responses={
            200: ActivationKeyDTOSerializer(many=True),
            404: {"description": "Server not found"},
        },
    )
    def get(self, request: Request, server_id: int) -> Response:
        """List activation keys of a server."""
        activated = request.query_params.get("activated", "").lower() in ("1", "true", "yes")
        return async_to_sync(self._handle_list)(server_id, activated)

    async def _handle_list(self, server_id: int, activated: bool) -> Response:
        with tracer.start_as_current_span("list_server_activation_keys") as span:
            span.set_attribute("server.id", server_id)
            span.set_attribute("activated", activated)

            server = await _server_repo.find_by_id(server_id)
            if not server:
                raise ServerNotFoundError(f"Server {server_id} not found")

            if activated:
                keys = await activation_key_registry.lookup_by_activated_server(server)
            else:
                keys = await activation_key_registry.lookup_by_server(server) or []

            span.set_attribute("activation_keys.count", len(keys))
            span.set_status(Status(StatusCode.OK))
            dtos = [ActivationKeyDTO.from_entity(activation_key) for activation_key in keys]
            return Response(ActivationKeyDTOSerializer(dtos, many=True).data)

    @extend_schema(
        operation_id="remove_server_activation_keys",
        summary="Remove Server Activation Keys",
        description="Delete every activation key bound to a server. Repeated calls return 0.",
        tags=["Servers"],
        responses={200: RemoveActivationKeysResponseSerializer},
    )
    def delete(self, request: Request, server_id: int) -> Response:
        """Delete activation keys bound to a server."""
        return async_to_sync(self._handle_delete)(server_id)

    async def _handle_delete(self, server_id: int) -> Response:
        with tracer.start_as_current_span("remove_server_activation_keys") as span:
            span.set_attribute("server.id", server_id)
            removed = await activation_key_registry.remove_keys_for_server(server_id)
            span.set_attribute("activation_keys.removed", removed)
            span.set_status(Status(StatusCode.OK))
            return Response(
                RemoveActivationKeysResponseSerializer({"removed": removed}).data,
                status=status.HTTP_200_OK,
            )
