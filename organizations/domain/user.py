"""
User domain entity.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """A user belonging to exactly one organization."""

    id: Optional[int]
    login: str
    org_id: int

    def __post_init__(self):
        """Validate user entity."""
        if not self.login or len(self.login.strip()) == 0:
            raise ValueError("User login cannot be empty")
        if self.org_id is None:
            raise ValueError("Org ID is required")

    @classmethod
    def create(cls, login: str, org_id: int) -> "User":
        return cls(id=None, login=login.strip(), org_id=org_id)
