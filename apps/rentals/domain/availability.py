"""
Availability Checker

A vehicle's schedule is the set of its rentals. This is the single place
deciding whether a requested period can still be booked; RentalService
runs it while holding a lock on the vehicle row so that no two active
rentals of the same vehicle ever overlap once committed.
"""

from dataclasses import dataclass, field
from typing import List
from uuid import UUID

from shared.domain.value_objects import DateRange
from apps.rentals.domain.entities import Rental


@dataclass
class VehicleSchedule:
    """
    Rentals of one vehicle, loaded for an availability decision

    Usage:
        schedule = VehicleSchedule(vehicle.id, rental_repo.list_for_vehicle(vehicle.id))
        if not schedule.is_available(dates):
            raise RangeUnavailable(...)
    """

    vehicle_id: UUID
    rentals: List[Rental] = field(default_factory=list)

    def __post_init__(self):
        self.rentals = list(self.rentals)

    def conflicts_with(self, dates: DateRange) -> List[Rental]:
        """Active rentals overlapping ``dates`` (touching boundaries included)"""
        return [rental for rental in self.rentals if rental.blocks(dates)]

    def is_available(self, dates: DateRange) -> bool:
        """Cancelled rentals never block, whatever their dates"""
        return not any(rental.blocks(dates) for rental in self.rentals)
