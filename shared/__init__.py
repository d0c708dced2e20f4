"""
Shared Kernel

Base domain classes, value objects, domain exceptions and the application
plumbing (Unit of Work, message bus) shared by the vehicle, client and
rental apps.
"""
