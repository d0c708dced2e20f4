"""
Pricing Calculator

A rental is charged the vehicle's daily rate for every whole day between
its start and end date. The charge is computed once, at creation, and
later rate changes never touch existing rentals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.domain.value_objects import Money, DateRange

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.rentals.domain.entities import Vehicle


def calculate_charge(vehicle: "Vehicle", dates: DateRange) -> Money:
    """
    Charge for renting ``vehicle`` over ``dates``

    DateRange guarantees start_date < end_date, so the number of days is
    always a positive integer and the multiplication is exact.
    """
    return vehicle.daily_rate * dates.days
