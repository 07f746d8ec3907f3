"""
Kickstart module - provisioning profiles and provisioning sessions.

This module handles:
- KickstartData (a provisioning profile) and the activation key tokens
  it registers new servers with
- KickstartSession (one provisioning run of a profile)
"""
