"""
Model registry for the kickstart app.
"""
from kickstart.infrastructure.models import KickstartData, KickstartSession  # noqa: F401
