"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""

from typing import Optional, Sequence


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ActivationKeyException(DomainException):
    """Base exception for activation key errors."""

    pass


class ActivationKeyValidationError(ActivationKeyException):
    """
    Raised when an activation key name fails validation.

    Both sub-reasons share this type; callers that only care about
    "the key name is unusable" catch this class.
    """

    def __init__(
        self,
        key: str,
        message: str = "Invalid activation key",
        code: str = "ACTIVATION_KEY_INVALID",
    ):
        super().__init__(message, code=code)
        self.key = key


class InvalidActivationKeyCharactersError(ActivationKeyValidationError):
    """Raised when an activation key contains disallowed characters."""

    def __init__(self, key: str, invalid_chars: Sequence[str]):
        self.invalid_chars = tuple(invalid_chars)
        super().__init__(
            key,
            message=(
                f"Activation key '{key}' contains invalid characters "
                f"[{' '.join(self.invalid_chars)}]"
            ),
            code="ACTIVATION_KEY_INVALID_CHARS",
        )


class ActivationKeyExistsError(ActivationKeyValidationError):
    """Raised when an activation key with the same name already exists."""

    def __init__(self, key: str):
        super().__init__(
            key,
            message=f"Activation key '{key}' already exists",
            code="ACTIVATION_KEY_EXISTS",
        )


class OrganizationException(DomainException):
    """Base exception for organization-related errors."""

    pass


class OrgNotFoundError(OrganizationException):
    """Raised when an organization is not found."""

    def __init__(self, message: str = "Organization not found"):
        super().__init__(message, code="ORG_NOT_FOUND")


class OrgUserNotFoundError(OrganizationException):
    """Raised when a user is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, code="USER_NOT_FOUND")


class ServerException(DomainException):
    """Base exception for server-related errors."""

    pass


class ServerNotFoundError(ServerException):
    """Raised when a server is not found."""

    def __init__(self, message: str = "Server not found"):
        super().__init__(message, code="SERVER_NOT_FOUND")


class ChannelNotFoundError(ServerException):
    """Raised when a software channel is not found."""

    def __init__(self, message: str = "Channel not found"):
        super().__init__(message, code="CHANNEL_NOT_FOUND")


class ContactMethodNotFoundError(ServerException):
    """Raised when a server contact method is not configured."""

    def __init__(self, method_id: Optional[int] = None):
        message = "Contact method not found"
        if method_id is not None:
            message = f"Contact method {method_id} not found"
        super().__init__(message, code="CONTACT_METHOD_NOT_FOUND")


class ServerGroupTypeNotFoundError(ServerException):
    """Raised when a server group type (entitlement) is not configured."""

    def __init__(self, label: str):
        super().__init__(
            f"Server group type '{label}' not found",
            code="SERVER_GROUP_TYPE_NOT_FOUND",
        )
