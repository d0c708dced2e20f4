"""
Domain Exceptions

Typed failures raised by the domain and application layers.
Every failure is terminal for the requested operation; the API layer
translates them into client-error responses using ``code``.
"""


class DomainError(Exception):
    """Base class for all expected domain failures"""
    code = 'domain_error'

    def __init__(self, message: str = ''):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__


class InvalidInput(DomainError, ValueError):
    """Input is malformed or out of range"""
    code = 'invalid_input'


class AlreadyExists(DomainError):
    """Entity with the same unique identifier already exists"""
    code = 'already_exists'


class NotFound(DomainError):
    """Referenced entity does not exist"""
    code = 'not_found'


class EntityInactive(DomainError):
    """Referenced entity has been deactivated"""
    code = 'entity_inactive'


class RangeUnavailable(DomainError):
    """Vehicle is already rented for an overlapping period"""
    code = 'range_unavailable'


class HasActiveObligation(DomainError):
    """Entity still has ongoing rentals"""
    code = 'has_active_obligation'


class VehicleInUse(HasActiveObligation):
    """Vehicle is rented"""
    code = 'vehicle_in_use'


class ClientHasActiveRental(HasActiveObligation):
    """Client has active rentals"""
    code = 'client_has_active_rental'
