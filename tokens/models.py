"""
Model registry for the tokens app.
"""
from tokens.infrastructure.models import ActivationKey, Token  # noqa: F401
