"""
Model registry for the organizations app.

Django discovers an app's tables through ``<app>.models``; the ORM
classes live in the infrastructure layer.
"""
from organizations.infrastructure.models import Org, OrgUser  # noqa: F401
