"""
Tokens module - activation keys and the registration tokens they wrap.

This module handles:
- ActivationKey and Token entities
- Key name rules (generation, sanitization, validation)
- Entitlement defaulting for new keys
- The activation key registry (create, lookup, remove)
"""
