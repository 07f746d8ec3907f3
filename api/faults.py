"""
Faults returned to remote API callers.

A fault is a typed error with a fixed numeric code and a short label that
clients match on, plus a human readable message.
"""
from typing import Optional


class FaultException(Exception):
    """
    Base class for API faults.

    Args:
        code: Numeric fault code
        label: Short fault name
        message: Human readable message
        cause: Underlying exception, chained as __cause__
    """

    def __init__(
        self,
        code: int,
        label: str,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.code = code
        self.label = label
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict:
        return {"code": self.code, "label": self.label, "message": self.message}


class InvalidTokenFault(FaultException):
    """Raised when an activation key or token cannot be resolved or created."""

    CODE = 11000
    LABEL = "invalidToken"
    DEFAULT_MESSAGE = "Invalid token"

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            self.CODE,
            self.LABEL,
            message or self.DEFAULT_MESSAGE,
            cause=cause,
        )
