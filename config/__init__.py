"""Top-level package for Django configuration.

Contains the settings modules for the different environments, the root
URLconf and the WSGI/ASGI entry points of the fleet rental service.
"""
