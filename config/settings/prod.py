"""Production settings for the fleet rental project.

Debug is always off and the secret key must come from the environment.
"""

from django.core.exceptions import ImproperlyConfigured  # type: ignore

from .base import *  # noqa: F401,F403

DEBUG = False

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', '').split(',')  # noqa: F405

if not os.environ.get('DJANGO_SECRET_KEY'):  # noqa: F405
    raise ImproperlyConfigured("Missing required environment variable: DJANGO_SECRET_KEY")

SECURE_CONTENT_TYPE_NOSNIFF = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
