"""
Repositories

Persistence for the rental domain on top of the Django ORM. Repositories
translate between ORM rows and domain entities; the domain never sees a
model instance. Rentals are looked up by foreign key on demand.
"""

from __future__ import annotations

from typing import List
from uuid import UUID

from django.conf import settings  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils import timezone  # type: ignore

from apps.clients.models import Client as ClientModel
from apps.rentals.domain.entities import Client, Rental, Vehicle
from apps.rentals.models import Rental as RentalModel
from apps.vehicles.models import Vehicle as VehicleModel
from shared.domain.exceptions import AlreadyExists
from shared.domain.value_objects import DateRange, Money


def _currency() -> str:
    return getattr(settings, "RENTAL_CURRENCY", "USD")


def _coerce_uuid(value) -> UUID | None:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class DjangoVehicleRepository:
    """Vehicles stored in ``vehicles.Vehicle``."""

    def get_by_id(self, vehicle_id, lock: bool = False) -> Vehicle | None:
        """
        Load a vehicle, optionally locking its row

        The lock serializes bookings and deactivation of the same vehicle
        until the surrounding transaction ends.
        """
        pk = _coerce_uuid(vehicle_id)
        if pk is None:
            return None
        queryset = VehicleModel.objects.filter(pk=pk)
        if lock:
            queryset = _lock_queryset_if_possible(queryset)
        row = queryset.first()
        return self._to_domain(row) if row else None

    def exists_with_chassis_number(self, chassis_number: str) -> bool:
        return VehicleModel.objects.filter(chassis_number=chassis_number).exists()

    def add(self, vehicle: Vehicle) -> None:
        try:
            with transaction.atomic():
                VehicleModel.objects.create(
                    id=vehicle.id,
                    chassis_number=vehicle.chassis_number,
                    make=vehicle.make,
                    model=vehicle.model,
                    daily_rate=vehicle.daily_rate.amount,
                    is_active=vehicle.is_active,
                )
        except IntegrityError as exc:
            # lost a race against a concurrent registration
            raise AlreadyExists("Vehicle is already created") from exc

    def save(self, vehicle: Vehicle) -> None:
        VehicleModel.objects.filter(pk=vehicle.id).update(is_active=vehicle.is_active, updated_at=timezone.now())

    @staticmethod
    def _to_domain(row: VehicleModel) -> Vehicle:
        return Vehicle(
            id=row.id,
            created_at=row.created_at,
            chassis_number=row.chassis_number,
            make=row.make,
            model=row.model,
            daily_rate=Money(row.daily_rate, _currency()),
            is_active=row.is_active,
        )


class DjangoClientRepository:
    """Clients stored in ``clients.Client``."""

    def get_by_id(self, client_id, lock: bool = False) -> Client | None:
        pk = _coerce_uuid(client_id)
        if pk is None:
            return None
        queryset = ClientModel.objects.filter(pk=pk)
        if lock:
            queryset = _lock_queryset_if_possible(queryset)
        row = queryset.first()
        return self._to_domain(row) if row else None

    def exists_with_email(self, email: str) -> bool:
        return ClientModel.objects.filter(email__iexact=email).exists()

    def add(self, client: Client) -> None:
        try:
            with transaction.atomic():
                ClientModel.objects.create(
                    id=client.id,
                    first_name=client.first_name,
                    last_name=client.last_name,
                    email=client.email,
                    is_active=client.is_active,
                )
        except IntegrityError as exc:
            raise AlreadyExists("Client is already created") from exc

    def save(self, client: Client) -> None:
        ClientModel.objects.filter(pk=client.id).update(is_active=client.is_active, updated_at=timezone.now())

    @staticmethod
    def _to_domain(row: ClientModel) -> Client:
        return Client(
            id=row.id,
            created_at=row.created_at,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            is_active=row.is_active,
        )


class DjangoRentalRepository:
    """Rentals stored in ``rentals.Rental``."""

    def get_by_id(self, rental_id, lock: bool = False) -> Rental | None:
        pk = _coerce_uuid(rental_id)
        if pk is None:
            return None
        queryset = RentalModel.objects.filter(pk=pk)
        if lock:
            queryset = _lock_queryset_if_possible(queryset)
        row = queryset.first()
        return self._to_domain(row) if row else None

    def list_for_vehicle(self, vehicle_id: UUID) -> List[Rental]:
        return [self._to_domain(row) for row in RentalModel.objects.filter(vehicle_id=vehicle_id)]

    def list_for_client(self, client_id: UUID) -> List[Rental]:
        return [self._to_domain(row) for row in RentalModel.objects.filter(client_id=client_id)]

    def add(self, rental: Rental) -> None:
        RentalModel.objects.create(
            id=rental.id,
            vehicle_id=rental.vehicle_id,
            client_id=rental.client_id,
            start_date=rental.start_date,
            end_date=rental.end_date,
            charge=rental.charge.amount,
            is_active=rental.is_active,
        )

    def save(self, rental: Rental) -> None:
        # is_active is the only mutable field of a rental
        RentalModel.objects.filter(pk=rental.id).update(is_active=rental.is_active, updated_at=timezone.now())

    @staticmethod
    def _to_domain(row: RentalModel) -> Rental:
        return Rental(
            id=row.id,
            created_at=row.created_at,
            vehicle_id=row.vehicle_id,
            client_id=row.client_id,
            dates=DateRange(row.start_date, row.end_date),
            charge=Money(row.charge, _currency()),
            is_active=row.is_active,
        )
