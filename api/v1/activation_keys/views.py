"""
Activation key API views.

These endpoints are used by management tooling to:
- Create activation keys (generated or named, optionally server bound)
- Look up and delete a key by its key string
- List the kickstart profiles that use a key
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.faults import InvalidTokenFault
from api.v1.activation_keys.serializers import (
    ActivationKeyDTOSerializer,
    CreateActivationKeyRequestSerializer,
    KickstartProfileDTOSerializer,
)
from core.domain.exceptions import ChannelNotFoundError, OrgUserNotFoundError, ServerNotFoundError
from core.instrumentation import Status, StatusCode, get_tracer
from organizations.infrastructure.repositories.django_org_repository import DjangoOrgRepository
from organizations.infrastructure.repositories.django_user_repository import DjangoUserRepository
from servers.infrastructure.repositories.django_channel_repository import DjangoChannelRepository
from servers.infrastructure.repositories.django_server_repository import DjangoServerRepository
from tokens.application.dto.activation_key_dto import ActivationKeyDTO, KickstartProfileDTO
from tokens.application.services.activation_key_registry import activation_key_registry

# Initialize repositories (in production, use DI container)
_user_repo = DjangoUserRepository()
_org_repo = DjangoOrgRepository()
_server_repo = DjangoServerRepository()
_channel_repo = DjangoChannelRepository()

tracer = get_tracer(__name__)

KEY_PARAMETER = OpenApiParameter(
    name="key",
    type=str,
    location=OpenApiParameter.PATH,
    description="Activation key string",
)


async def _to_dto(activation_key) -> ActivationKeyDTO:
    """Build the response DTO, resolving the org's universal default."""
    org = await _org_repo.find_by_id(activation_key.org_id)
    universal_default = bool(org and org.is_universal_default(activation_key.token.id))
    return ActivationKeyDTO.from_entity(activation_key, universal_default=universal_default)


async def _get_key_or_fault(key: str):
    activation_key = await activation_key_registry.lookup_by_key(key)
    if activation_key is None:
        raise InvalidTokenFault(f"Activation key '{key}' not found")
    return activation_key


class ActivationKeyCreateView(APIView):
    """View for creating activation keys."""

    @extend_schema(
        operation_id="create_activation_key",
        summary="Create Activation Key",
        description=(
            "Create an activation key for the user's organization. An empty key is "
            "generated; a key bound to a server is prefixed with 're-'."
        ),
        tags=["Activation Keys"],
        request=CreateActivationKeyRequestSerializer,
        responses={
            201: ActivationKeyDTOSerializer,
            400: {"description": "Bad Request - invalid or duplicate key name"},
            404: {"description": "User, server or channel not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create an activation key."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create activation key."""
        with tracer.start_as_current_span("create_activation_key") as span:
            span.set_attribute("operation", "create_activation_key")

            serializer = CreateActivationKeyRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)
            data = serializer.validated_data

            user = await _user_repo.find_by_id(data["user_id"])
            if not user:
                raise OrgUserNotFoundError(f"User {data['user_id']} not found")
            span.set_attribute("org.id", user.org_id)

            server = None
            if data.get("server_id") is not None:
                server = await _server_repo.find_by_id(data["server_id"])
                if not server:
                    raise ServerNotFoundError(f"Server {data['server_id']} not found")
                span.set_attribute("server.id", server.id)

            base_channel = None
            if data.get("base_channel_id") is not None:
                base_channel = await _channel_repo.find_by_id(data["base_channel_id"])
                if not base_channel:
                    raise ChannelNotFoundError(f"Channel {data['base_channel_id']} not found")

            activation_key = await activation_key_registry.create_new_key(
                user,
                data.get("note"),
                server=server,
                key=data.get("key"),
                usage_limit=data.get("usage_limit"),
                base_channel=base_channel,
                universal_default=data.get("universal_default", False),
            )

            span.set_attribute("activation_key", activation_key.key)
            span.set_status(Status(StatusCode.OK))

            response_serializer = ActivationKeyDTOSerializer(await _to_dto(activation_key))
            return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class ActivationKeyDetailView(APIView):
    """View for reading and deleting a single activation key."""

    @extend_schema(
        operation_id="get_activation_key",
        summary="Get Activation Key",
        tags=["Activation Keys"],
        parameters=[KEY_PARAMETER],
        responses={
            200: ActivationKeyDTOSerializer,
            404: {"description": "Invalid token fault"},
        },
    )
    def get(self, request: Request, key: str) -> Response:
        """Look up an activation key."""
        return async_to_sync(self._handle_get)(key)

    async def _handle_get(self, key: str) -> Response:
        with tracer.start_as_current_span("get_activation_key") as span:
            span.set_attribute("activation_key", key)
            activation_key = await _get_key_or_fault(key)
            span.set_status(Status(StatusCode.OK))
            return Response(ActivationKeyDTOSerializer(await _to_dto(activation_key)).data)

    @extend_schema(
        operation_id="delete_activation_key",
        summary="Delete Activation Key",
        tags=["Activation Keys"],
        parameters=[KEY_PARAMETER],
        responses={
            204: None,
            404: {"description": "Invalid token fault"},
        },
    )
    def delete(self, request: Request, key: str) -> Response:
        """Delete an activation key."""
        return async_to_sync(self._handle_delete)(key)

    async def _handle_delete(self, key: str) -> Response:
        with tracer.start_as_current_span("delete_activation_key") as span:
            span.set_attribute("activation_key", key)
            activation_key = await _get_key_or_fault(key)
            await activation_key_registry.remove_key(activation_key)
            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)


class ActivationKeyKickstartsView(APIView):
    """View for listing the kickstart profiles that use a key."""

    @extend_schema(
        operation_id="list_activation_key_kickstarts",
        summary="List Associated Kickstarts",
        tags=["Activation Keys"],
        parameters=[KEY_PARAMETER],
        responses={
            200: KickstartProfileDTOSerializer(many=True),
            404: {"description": "Invalid token fault"},
        },
    )
    def get(self, request: Request, key: str) -> Response:
        """List kickstart profiles associated with an activation key."""
        return async_to_sync(self._handle_list)(key)

    async def _handle_list(self, key: str) -> Response:
        with tracer.start_as_current_span("list_activation_key_kickstarts") as span:
            span.set_attribute("activation_key", key)
            activation_key = await _get_key_or_fault(key)
            profiles = await activation_key_registry.list_associated_kickstarts(activation_key)
            span.set_attribute("kickstarts.count", len(profiles))
            span.set_status(Status(StatusCode.OK))
            dtos = [KickstartProfileDTO.from_entity(profile) for profile in profiles]
            return Response(KickstartProfileDTOSerializer(dtos, many=True).data)
