"""
WSGI config for ActivationKeyService project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ActivationKeyService.settings.dev")

application = get_wsgi_application()
