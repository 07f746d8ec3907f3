"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


class EntitlementLabel(Enum):
    """Well-known server group type labels."""

    ENTERPRISE_ENTITLED = "enterprise_entitled"
    BOOTSTRAP_ENTITLED = "bootstrap_entitled"

    def __str__(self) -> str:
        """Return label as string."""
        return self.value


@dataclass(frozen=True)
class ServerGroupType(ValueObject):
    """
    Entitlement (server group type) value object.

    Identity is the label; id and name are carried for display.
    """

    label: str
    id: Optional[int] = None
    name: str = ""

    def __post_init__(self):
        """Validate label."""
        if not self.label or len(self.label.strip()) == 0:
            raise ValueError("Server group type label cannot be empty")

    def __eq__(self, other):
        if not isinstance(other, ServerGroupType):
            return False
        return self.label == other.label

    def __hash__(self):
        return hash(self.label)

    def __str__(self) -> str:
        """Return label as string."""
        return self.label

    @property
    def is_bootstrap(self) -> bool:
        return self.label == EntitlementLabel.BOOTSTRAP_ENTITLED.value

    @classmethod
    def enterprise_entitled(cls) -> "ServerGroupType":
        """Default entitlement assigned to new activation keys."""
        return cls(
            label=EntitlementLabel.ENTERPRISE_ENTITLED.value,
            name="Management",
        )


DEFAULT_CONTACT_METHOD_ID = 0


@dataclass(frozen=True)
class ContactMethod(ValueObject):
    """Server contact method value object."""

    id: int
    label: str

    def __post_init__(self):
        """Validate contact method."""
        if self.id is None or self.id < 0:
            raise ValueError("Contact method id must be a non-negative integer")
        if not self.label:
            raise ValueError("Contact method label cannot be empty")

    def __str__(self) -> str:
        """Return label as string."""
        return self.label

    @classmethod
    def default(cls) -> "ContactMethod":
        """The system default contact method."""
        return cls(id=DEFAULT_CONTACT_METHOD_ID, label="default")
