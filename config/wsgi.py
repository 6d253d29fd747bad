"""
WSGI config for ariomuse-studio project.

Used by traditional WSGI servers (gunicorn).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()
