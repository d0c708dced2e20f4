"""
Rental Commands

Inputs accepted by RentalService. The API serializers have already checked
field presence and format; the service re-checks the domain rules
(date ordering, positive rate, uniqueness).
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class RegisterVehicleCommand:
    """Command to add a vehicle to the fleet"""
    chassis_number: str
    make: str
    model: str
    daily_rate: Decimal


@dataclass(frozen=True)
class DeactivateVehicleCommand:
    """Command to withdraw a vehicle (soft delete)"""
    vehicle_id: UUID


@dataclass(frozen=True)
class RegisterClientCommand:
    """Command to register a client"""
    first_name: str
    last_name: str
    email: str


@dataclass(frozen=True)
class DeactivateClientCommand:
    """Command to deactivate a client (soft delete)"""
    client_id: UUID


@dataclass(frozen=True)
class CreateRentalCommand:
    """
    Command to rent a vehicle to a client

    The charge is never part of the input, it is always computed.
    """
    vehicle_id: UUID
    client_id: UUID
    start_date: date
    end_date: date


@dataclass(frozen=True)
class CancelRentalCommand:
    """Command to cancel a rental"""
    rental_id: UUID
