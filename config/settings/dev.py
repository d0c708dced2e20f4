"""Development settings for the fleet rental project.

This module extends the base settings with development specific
configuration: debug on, all hosts allowed and verbose application logs.
Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

LOGGING["loggers"]["apps"]["level"] = os.environ.get('LOG_LEVEL', 'DEBUG')  # noqa: F405
