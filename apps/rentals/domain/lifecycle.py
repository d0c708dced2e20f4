"""
Lifecycle Guard

Decides whether a vehicle or client may be deactivated. An entity is
blocked while it has an active obligation: an active rental whose end
date is today or later.

Rentals that are fully elapsed (end_date < today) but were never
cancelled do not block. Nothing expires rentals automatically, so these
stay marked active forever; that window is accepted as is.
"""

from datetime import date
from typing import Iterable

from apps.rentals.domain.entities import Rental


def has_active_obligation(rentals: Iterable[Rental], today: date) -> bool:
    """True if any of the entity's rentals is active and not yet elapsed"""
    return any(rental.is_outstanding(today) for rental in rentals)
