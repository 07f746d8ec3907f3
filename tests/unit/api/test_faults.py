"""
Unit tests for API faults.
"""
import pytest

from api.faults import FaultException, InvalidTokenFault


class TestInvalidTokenFault:
    """Tests for InvalidTokenFault."""

    def test_defaults(self):
        fault = InvalidTokenFault()

        assert fault.code == 11000
        assert fault.label == "invalidToken"
        assert fault.message == "Invalid token"
        assert str(fault) == "Invalid token"
        assert fault.cause is None

    def test_custom_message(self):
        fault = InvalidTokenFault("Activation key 'x' not found")

        assert fault.message == "Activation key 'x' not found"
        assert fault.code == 11000

    def test_wraps_cause(self):
        cause = LookupError("no row")
        fault = InvalidTokenFault(cause=cause)

        assert fault.cause is cause
        assert fault.__cause__ is cause
        assert fault.message == "Invalid token"

    def test_message_and_cause(self):
        cause = ValueError("bad")
        fault = InvalidTokenFault("Token lookup failed", cause)

        assert fault.message == "Token lookup failed"
        assert fault.__cause__ is cause

    def test_is_fault(self):
        with pytest.raises(FaultException):
            raise InvalidTokenFault()

    def test_to_dict(self):
        assert InvalidTokenFault().to_dict() == {
            "code": 11000,
            "label": "invalidToken",
            "message": "Invalid token",
        }
