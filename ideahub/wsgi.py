"""
WSGI entry point served by Gunicorn (see gunicorn.conf.py).

Importing settings runs validate_env(), so a misconfigured production
host fails here before any worker takes traffic.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ideahub.settings")

application = get_wsgi_application()
