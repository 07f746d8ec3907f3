"""
Channel domain entity.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Channel:
    """
    A software channel servers subscribe to.

    A channel without a parent is a base channel.
    """

    id: Optional[int]
    label: str
    name: str
    org_id: Optional[int] = None
    parent_id: Optional[int] = None

    def __post_init__(self):
        """Validate channel entity."""
        if not self.label or len(self.label.strip()) == 0:
            raise ValueError("Channel label cannot be empty")
        if len(self.label) > 128:
            raise ValueError("Channel label too long")

    @classmethod
    def create(
        cls,
        label: str,
        name: str = "",
        org_id: Optional[int] = None,
        parent_id: Optional[int] = None,
    ) -> "Channel":
        return cls(
            id=None,
            label=label.strip(),
            name=(name or label).strip(),
            org_id=org_id,
            parent_id=parent_id,
        )

    @property
    def is_base_channel(self) -> bool:
        return self.parent_id is None
