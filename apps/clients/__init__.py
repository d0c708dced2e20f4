"""Clients app package.

Persistence model, admin and REST endpoints for renters. Registration and
deactivation are delegated to the rental domain through the message bus.
"""
