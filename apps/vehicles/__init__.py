"""Vehicles app package.

Persistence model, admin and REST endpoints for the rentable fleet.
Registration and deactivation are delegated to the rental domain through
the message bus.
"""
