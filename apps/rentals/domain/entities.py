"""
Rental Domain Entities

Core business entities for the rental domain:
- Vehicle: rentable asset with a daily rate
- Client: customer eligible to hold rentals
- Rental: date-bounded, priced booking of one vehicle by one client

Vehicles and clients never hold their rentals. Rentals reference them by
id and are queried on demand, so there is no object graph to keep in sync.
State flips (deactivate, cancel) are one-way and only performed by
RentalService.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID
import re

from shared.domain.base import Aggregate
from shared.domain.exceptions import InvalidInput
from shared.domain.value_objects import Money, DateRange
from apps.rentals.domain.pricing import calculate_charge

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# bounds of vehicles.Vehicle.daily_rate (10, 2) and rentals.Rental.charge (12, 2)
CENT = Decimal("0.01")
MAX_DAILY_RATE = Decimal("99999999.99")
MAX_CHARGE = Decimal("9999999999.99")


def _require(value: str, label: str) -> str:
    value = (value or '').strip()
    if not value:
        raise InvalidInput(f"{label} is required")
    return value


@dataclass(kw_only=True, eq=False)
class Vehicle(Aggregate):
    """
    Vehicle Aggregate Root

    Key invariants:
    - chassis_number is unique across all vehicles, active or not
    - daily_rate is strictly positive, in whole cents, and fits its column
    - once deactivated a vehicle is never reactivated
    """

    chassis_number: str
    make: str
    model: str
    daily_rate: Money
    is_active: bool = True

    @classmethod
    def register(cls, chassis_number: str, make: str, model: str, daily_rate: Money) -> 'Vehicle':
        """
        Create a new active vehicle

        Uniqueness of the chassis number is checked by the service,
        this only enforces field-level rules.
        Events: VehicleRegistered
        """
        if not daily_rate.is_positive:
            raise InvalidInput("Price must be greater than 0")
        if daily_rate.amount > MAX_DAILY_RATE:
            raise InvalidInput(f"Price must not exceed {MAX_DAILY_RATE}")
        if daily_rate.amount != daily_rate.amount.quantize(CENT):
            raise InvalidInput("Price can have at most 2 decimal places")

        vehicle = cls(
            chassis_number=_require(chassis_number, "Chassis Number"),
            make=_require(make, "Make"),
            model=_require(model, "Model"),
            daily_rate=daily_rate,
        )

        from apps.rentals.domain.events import VehicleRegistered

        vehicle.add_event(VehicleRegistered(
            aggregate_id=vehicle.id,
            vehicle_id=vehicle.id,
            chassis_number=vehicle.chassis_number,
            daily_rate=daily_rate,
        ))
        return vehicle

    def deactivate(self) -> bool:
        """
        Deactivate vehicle (active -> inactive)

        Returns False when the vehicle was already inactive (no-op).
        The active-obligation guard is evaluated by the caller.
        Events: VehicleDeactivated
        """
        if not self.is_active:
            return False

        from apps.rentals.domain.events import VehicleDeactivated

        self.is_active = False
        self.add_event(VehicleDeactivated(aggregate_id=self.id, vehicle_id=self.id))
        return True

    def __str__(self):
        return f"{self.make} {self.model} ({self.chassis_number})"


@dataclass(kw_only=True, eq=False)
class Client(Aggregate):
    """
    Client Aggregate Root

    Key invariants:
    - email is unique across all clients, active or not
    - once deactivated a client is never reactivated
    """

    first_name: str
    last_name: str
    email: str
    is_active: bool = True

    @classmethod
    def register(cls, first_name: str, last_name: str, email: str) -> 'Client':
        """
        Create a new active client

        Emails are stored lower-cased so uniqueness is case-insensitive.
        Events: ClientRegistered
        """
        email = _require(email, "Email").lower()
        if not EMAIL_RE.match(email):
            raise InvalidInput(f"'{email}' is not a valid email address")

        client = cls(
            first_name=_require(first_name, "First Name"),
            last_name=_require(last_name, "Last Name"),
            email=email,
        )

        from apps.rentals.domain.events import ClientRegistered

        client.add_event(ClientRegistered(
            aggregate_id=client.id,
            client_id=client.id,
            email=client.email,
        ))
        return client

    def deactivate(self) -> bool:
        """
        Deactivate client (active -> inactive)

        Returns False when the client was already inactive (no-op).
        Events: ClientDeactivated
        """
        if not self.is_active:
            return False

        from apps.rentals.domain.events import ClientDeactivated

        self.is_active = False
        self.add_event(ClientDeactivated(aggregate_id=self.id, client_id=self.id))
        return True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self):
        return f"{self.full_name} <{self.email}>"


@dataclass(kw_only=True, eq=False)
class Rental(Aggregate):
    """
    Rental Aggregate Root

    Key invariants:
    - dates.start_date < dates.end_date (at least one full day)
    - charge = vehicle daily rate at creation * number of days
    - only is_active may change after creation, and only active -> inactive
    """

    vehicle_id: UUID
    client_id: UUID
    dates: DateRange
    charge: Money
    is_active: bool = True

    @classmethod
    def book(cls, vehicle: Vehicle, client: Client, dates: DateRange) -> 'Rental':
        """
        Create an active rental with its charge computed once

        Availability and the active state of vehicle and client are
        checked by the service before calling this.
        Fails with InvalidInput when the charge is too large to store.
        Events: RentalCreated
        """
        charge = calculate_charge(vehicle, dates)
        if charge.amount > MAX_CHARGE:
            raise InvalidInput(f"Rental charge must not exceed {MAX_CHARGE}")

        rental = cls(
            vehicle_id=vehicle.id,
            client_id=client.id,
            dates=dates,
            charge=charge,
        )

        from apps.rentals.domain.events import RentalCreated

        rental.add_event(RentalCreated(
            aggregate_id=rental.id,
            rental_id=rental.id,
            vehicle_id=rental.vehicle_id,
            client_id=rental.client_id,
            dates=dates,
            charge=rental.charge,
        ))
        return rental

    def cancel(self) -> bool:
        """
        Cancel rental (active -> inactive)

        Cancelling an already cancelled rental is a no-op and returns False.
        Events: RentalCancelled
        """
        if not self.is_active:
            return False

        from apps.rentals.domain.events import RentalCancelled

        self.is_active = False
        self.add_event(RentalCancelled(
            aggregate_id=self.id,
            rental_id=self.id,
            vehicle_id=self.vehicle_id,
            client_id=self.client_id,
            dates=self.dates,
        ))
        return True

    def blocks(self, dates: DateRange) -> bool:
        """Active rentals block every overlapping range, cancelled ones never do"""
        return self.is_active and self.dates.overlaps_with(dates)

    def is_outstanding(self, today: date) -> bool:
        """Active and not yet fully elapsed"""
        return self.is_active and not self.dates.ends_before(today)

    @property
    def start_date(self) -> date:
        return self.dates.start_date

    @property
    def end_date(self) -> date:
        return self.dates.end_date

    @property
    def days(self) -> int:
        return self.dates.days

    def __str__(self):
        return f"Rental {self.id} ({'active' if self.is_active else 'cancelled'})"

    def __repr__(self):
        return (
            f"Rental(id={self.id}, vehicle_id={self.vehicle_id}, "
            f"client_id={self.client_id}, dates={self.dates!r}, charge={self.charge!r})"
        )
