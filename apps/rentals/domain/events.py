"""
Rental Domain Events

Events that represent things that have happened in the rental domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from uuid import UUID

from shared.domain.base import DomainEvent
from shared.domain.value_objects import Money, DateRange


# ===== Vehicle Events =====

@dataclass(kw_only=True)
class VehicleRegistered(DomainEvent):
    """Event: A vehicle was added to the fleet"""
    vehicle_id: UUID
    chassis_number: str
    daily_rate: Money


@dataclass(kw_only=True)
class VehicleDeactivated(DomainEvent):
    """Event: A vehicle was withdrawn from the fleet (soft delete)"""
    vehicle_id: UUID


# ===== Client Events =====

@dataclass(kw_only=True)
class ClientRegistered(DomainEvent):
    """Event: A client was registered"""
    client_id: UUID
    email: str


@dataclass(kw_only=True)
class ClientDeactivated(DomainEvent):
    """Event: A client was deactivated (soft delete)"""
    client_id: UUID


# ===== Rental Events =====

@dataclass(kw_only=True)
class RentalCreated(DomainEvent):
    """
    Event: A vehicle was rented to a client

    The charge is fixed at creation and never recomputed.
    """
    rental_id: UUID
    vehicle_id: UUID
    client_id: UUID
    dates: DateRange
    charge: Money


@dataclass(kw_only=True)
class RentalCancelled(DomainEvent):
    """Event: A rental was cancelled and no longer blocks its vehicle"""
    rental_id: UUID
    vehicle_id: UUID
    client_id: UUID
    dates: DateRange
