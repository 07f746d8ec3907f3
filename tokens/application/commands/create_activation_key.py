"""
CreateActivationKeyCommand.

Command to create an activation key for a user's organization.
"""
from dataclasses import dataclass
from typing import Optional

from organizations.domain.user import User
from servers.domain.channel import Channel
from servers.domain.server import Server


@dataclass
class CreateActivationKeyCommand:
    """
    Command to create an activation key.

    An empty key asks for a generated one. Supplying a server makes the
    key a re-registration key for that server.
    """

    user: User
    server: Optional[Server] = None
    key: Optional[str] = None
    note: Optional[str] = None
    usage_limit: Optional[int] = 0
    base_channel: Optional[Channel] = None
    universal_default: bool = False
