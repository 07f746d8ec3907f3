"""
Servers module - managed servers and the catalog they draw on.

This module handles:
- Server entity and its entitlement (server group type) state
- Software channels
- Server group types and contact methods as persisted reference data
"""
