"""
Organizations module - tenants and their users.

This module handles:
- Org entity (including the org-wide universal default token)
- User entity (the creator of activation keys)
"""
