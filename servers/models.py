"""
Model registry for the servers app.
"""
from servers.infrastructure.models import (  # noqa: F401
    Channel,
    ContactMethod,
    Server,
    ServerGroupType,
)
