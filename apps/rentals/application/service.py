"""
Rental Service

These are the use cases of the rental domain. Each operation runs inside
one Unit of Work: every check happens before any write, so a failure
leaves vehicles, clients and rentals untouched.

Operations:
- register_vehicle / deactivate_vehicle
- register_client / deactivate_client
- create_rental / cancel_rental
"""

from __future__ import annotations

from datetime import date
from typing import Callable

import structlog
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import (
    AlreadyExists,
    ClientHasActiveRental,
    EntityInactive,
    InvalidInput,
    NotFound,
    RangeUnavailable,
    VehicleInUse,
)
from shared.domain.value_objects import DateRange, Money
from apps.rentals.application.commands import (
    CancelRentalCommand,
    CreateRentalCommand,
    DeactivateClientCommand,
    DeactivateVehicleCommand,
    RegisterClientCommand,
    RegisterVehicleCommand,
)
from apps.rentals.domain.availability import VehicleSchedule
from apps.rentals.domain.entities import Client, Rental, Vehicle
from apps.rentals.domain.lifecycle import has_active_obligation
from apps.rentals.repositories import (
    DjangoClientRepository,
    DjangoRentalRepository,
    DjangoVehicleRepository,
)

logger = structlog.get_logger(__name__)


class RentalService:
    """
    Orchestrates vehicles, clients and rentals

    ``clock`` returns the current calendar date; it decides which rentals
    still block deactivation and how far back a rental may start.
    """

    def __init__(
        self,
        vehicle_repo=None,
        client_repo=None,
        rental_repo=None,
        uow_factory: Callable[[], DjangoUnitOfWork] = DjangoUnitOfWork,
        clock: Callable[[], date] = timezone.localdate,
        currency: str | None = None,
    ):
        self.vehicle_repo = vehicle_repo or DjangoVehicleRepository()
        self.client_repo = client_repo or DjangoClientRepository()
        self.rental_repo = rental_repo or DjangoRentalRepository()
        self.uow_factory = uow_factory
        self.clock = clock
        self.currency = currency or getattr(settings, "RENTAL_CURRENCY", "USD")

    # ===== Vehicles =====

    def register_vehicle(self, command: RegisterVehicleCommand) -> Vehicle:
        log = logger.bind(chassis_number=command.chassis_number)
        log.info("vehicle_register_attempt", make=command.make, model=command.model, daily_rate=str(command.daily_rate))

        vehicle = Vehicle.register(
            chassis_number=command.chassis_number,
            make=command.make,
            model=command.model,
            daily_rate=Money(command.daily_rate, self.currency),
        )

        with self.uow_factory() as uow:
            if self.vehicle_repo.exists_with_chassis_number(vehicle.chassis_number):
                log.warning("vehicle_register_rejected", code=AlreadyExists.code)
                raise AlreadyExists(f"Vehicle with chassis number {vehicle.chassis_number} is already created")

            uow.collect_events(vehicle)
            self.vehicle_repo.add(vehicle)

        log.info("vehicle_registered", vehicle_id=str(vehicle.id))
        return vehicle

    def deactivate_vehicle(self, command: DeactivateVehicleCommand) -> Vehicle:
        log = logger.bind(vehicle_id=str(command.vehicle_id))
        log.debug("vehicle_deactivate_attempt")

        with self.uow_factory() as uow:
            vehicle = self.vehicle_repo.get_by_id(command.vehicle_id, lock=True)
            if vehicle is None:
                raise NotFound("Vehicle does not exist")

            if not vehicle.is_active:
                log.info("vehicle_already_inactive")
                return vehicle

            if has_active_obligation(self.rental_repo.list_for_vehicle(vehicle.id), self.clock()):
                log.warning("vehicle_deactivate_rejected", code=VehicleInUse.code)
                raise VehicleInUse("Vehicle is rented")

            vehicle.deactivate()
            uow.collect_events(vehicle)
            self.vehicle_repo.save(vehicle)

        log.info("vehicle_deactivated")
        return vehicle

    # ===== Clients =====

    def register_client(self, command: RegisterClientCommand) -> Client:
        log = logger.bind(email=command.email)
        log.info("client_register_attempt")

        client = Client.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
        )

        with self.uow_factory() as uow:
            if self.client_repo.exists_with_email(client.email):
                log.warning("client_register_rejected", code=AlreadyExists.code)
                raise AlreadyExists(f"Client {client.email} is already created")

            uow.collect_events(client)
            self.client_repo.add(client)

        log.info("client_registered", client_id=str(client.id))
        return client

    def deactivate_client(self, command: DeactivateClientCommand) -> Client:
        log = logger.bind(client_id=str(command.client_id))
        log.debug("client_deactivate_attempt")

        with self.uow_factory() as uow:
            client = self.client_repo.get_by_id(command.client_id, lock=True)
            if client is None:
                raise NotFound("Client does not exist")

            if not client.is_active:
                log.info("client_already_inactive")
                return client

            if has_active_obligation(self.rental_repo.list_for_client(client.id), self.clock()):
                log.warning("client_deactivate_rejected", code=ClientHasActiveRental.code)
                raise ClientHasActiveRental("Client has active rentals")

            client.deactivate()
            uow.collect_events(client)
            self.client_repo.save(client)

        log.info("client_deactivated")
        return client

    # ===== Rentals =====

    def create_rental(self, command: CreateRentalCommand) -> Rental:
        """
        Rent a vehicle to a client

        Checks run in this order and the first failure wins:
        dates -> client (exists, active) -> vehicle (exists, active)
        -> availability. Client and vehicle rows stay locked until commit,
        so a concurrent booking or deactivation waits for this one.
        """
        log = logger.bind(
            vehicle_id=str(command.vehicle_id),
            client_id=str(command.client_id),
            start_date=str(command.start_date),
            end_date=str(command.end_date),
        )
        log.info("rental_create_attempt")

        dates = DateRange(command.start_date, command.end_date)
        if dates.starts_before(self.clock()):
            raise InvalidInput("Start date can not be in the past")

        with self.uow_factory() as uow:
            client = self.client_repo.get_by_id(command.client_id, lock=True)
            if client is None:
                raise NotFound("Client does not exist")
            if not client.is_active:
                raise EntityInactive("Client deleted - not available for rental")

            vehicle = self.vehicle_repo.get_by_id(command.vehicle_id, lock=True)
            if vehicle is None:
                raise NotFound("Vehicle does not exist")
            if not vehicle.is_active:
                raise EntityInactive("Vehicle deleted - not available for rental")

            schedule = VehicleSchedule(vehicle.id, self.rental_repo.list_for_vehicle(vehicle.id))
            if not schedule.is_available(dates):
                conflicts = schedule.conflicts_with(dates)
                log.warning("rental_create_rejected", code=RangeUnavailable.code, conflicts=len(conflicts))
                raise RangeUnavailable(f"Vehicle is already rented for {dates}")

            rental = Rental.book(vehicle, client, dates)
            log.debug("rental_charge_calculated", daily_rate=str(vehicle.daily_rate.amount), days=dates.days)

            uow.collect_events(rental)
            self.rental_repo.add(rental)

        log.info("rental_created", rental_id=str(rental.id), charge=str(rental.charge.amount))
        return rental

    def cancel_rental(self, command: CancelRentalCommand) -> Rental:
        log = logger.bind(rental_id=str(command.rental_id))
        log.debug("rental_cancel_attempt")

        with self.uow_factory() as uow:
            rental = self.rental_repo.get_by_id(command.rental_id, lock=True)
            if rental is None:
                raise NotFound("Rental does not exist")

            if not rental.cancel():
                log.info("rental_already_cancelled")
                return rental

            uow.collect_events(rental)
            self.rental_repo.save(rental)

        log.info("rental_cancelled")
        return rental
