"""Tests for the rental domain: entities, availability, lifecycle guard and pricing."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from apps.rentals.domain.availability import VehicleSchedule
from apps.rentals.domain.entities import Client, Rental, Vehicle
from apps.rentals.domain.events import (
    ClientDeactivated,
    RentalCancelled,
    RentalCreated,
    VehicleRegistered,
)
from apps.rentals.domain.lifecycle import has_active_obligation
from apps.rentals.domain.pricing import calculate_charge
from shared.domain.exceptions import InvalidInput
from shared.domain.value_objects import DateRange, Money

TODAY = date(2030, 6, 1)


def day(offset: int) -> date:
    return TODAY + timedelta(days=offset)


@pytest.fixture
def vehicle() -> Vehicle:
    return Vehicle.register("VIN-0001", "Toyota", "Corolla", Money(Decimal("10")))


@pytest.fixture
def client() -> Client:
    return Client.register("Ana", "Lopez", "ana@example.com")


def book(vehicle: Vehicle, client: Client, start: int, end: int, active: bool = True) -> Rental:
    rental = Rental.book(vehicle, client, DateRange(day(start), day(end)))
    if not active:
        rental.cancel()
    return rental


# ===== Pricing =====

def test_ten_day_rental_at_ten_per_day_costs_one_hundred(vehicle, client):
    rental = book(vehicle, client, 1, 11)

    assert rental.charge == Money(Decimal("100"))
    assert rental.days == 10


def test_charge_is_rate_times_days():
    vehicle = Vehicle.register("VIN-0002", "Fiat", "Panda", Money(Decimal("33.33")))

    assert calculate_charge(vehicle, DateRange(day(0), day(3))).amount == Decimal("99.99")


def test_charge_is_fixed_at_booking_time(vehicle, client):
    rental = book(vehicle, client, 1, 3)
    vehicle.daily_rate = Money(Decimal("50"))

    assert rental.charge.amount == Decimal("20")


# ===== Availability =====

def test_nested_range_is_unavailable(vehicle, client):
    schedule = VehicleSchedule(vehicle.id, [book(vehicle, client, 3, 7)])

    assert not schedule.is_available(DateRange(day(4), day(6)))


def test_cancelled_rentals_never_block(vehicle, client):
    schedule = VehicleSchedule(vehicle.id, [book(vehicle, client, 3, 7, active=False)])

    assert schedule.is_available(DateRange(day(4), day(6)))
    assert schedule.conflicts_with(DateRange(day(3), day(7))) == []


def test_back_to_back_rentals_conflict(vehicle, client):
    existing = book(vehicle, client, 3, 7)
    schedule = VehicleSchedule(vehicle.id, [existing])

    assert not schedule.is_available(DateRange(day(7), day(9)))
    assert not schedule.is_available(DateRange(day(1), day(3)))
    assert schedule.is_available(DateRange(day(8), day(9)))
    assert schedule.conflicts_with(DateRange(day(7), day(9))) == [existing]


def test_empty_schedule_is_available(vehicle):
    assert VehicleSchedule(vehicle.id).is_available(DateRange(day(1), day(2)))


# ===== Lifecycle guard =====

def test_elapsed_rental_does_not_block_deactivation(vehicle, client):
    elapsed = book(vehicle, client, -6, -2)

    assert elapsed.is_active
    assert not has_active_obligation([elapsed], TODAY)


def test_rental_ending_today_blocks_deactivation(vehicle, client):
    assert has_active_obligation([book(vehicle, client, -3, 0)], TODAY)


def test_future_rental_blocks_unless_cancelled(vehicle, client):
    assert has_active_obligation([book(vehicle, client, 5, 8)], TODAY)
    assert not has_active_obligation([book(vehicle, client, 5, 8, active=False)], TODAY)


# ===== Entities =====

def test_vehicle_registration_validates_fields():
    with pytest.raises(InvalidInput):
        Vehicle.register("", "Toyota", "Corolla", Money(Decimal("10")))
    with pytest.raises(InvalidInput):
        Vehicle.register("VIN-1", "Toyota", "  ", Money(Decimal("10")))
    with pytest.raises(InvalidInput):
        Vehicle.register("VIN-1", "Toyota", "Corolla", Money(Decimal("0")))


def test_vehicle_registration_records_event(vehicle):
    (event,) = vehicle.events

    assert isinstance(event, VehicleRegistered)
    assert event.vehicle_id == vehicle.id
    assert event.to_dict()["chassis_number"] == "VIN-0001"
    assert event.to_dict()["daily_rate"] == "10.00 USD"


@pytest.mark.parametrize("rate", ["0.004", "10.005", "100000000"])
def test_vehicle_rate_must_fit_whole_cents_and_column(rate):
    with pytest.raises(InvalidInput):
        Vehicle.register("VIN-1", "Toyota", "Corolla", Money(Decimal(rate)))


def test_vehicle_rate_at_bounds_is_accepted():
    assert Vehicle.register("VIN-1", "Toyota", "Corolla", Money(Decimal("10.000"))).daily_rate.is_positive
    assert Vehicle.register("VIN-2", "Toyota", "Corolla", Money(Decimal("99999999.99"))).is_active


def test_charge_too_large_to_store_is_rejected(client):
    pricey = Vehicle.register("VIN-3", "Bugatti", "Chiron", Money(Decimal("99999999.99")))

    assert Rental.book(pricey, client, DateRange(day(0), day(100))).charge.amount == Decimal("9999999999.00")
    with pytest.raises(InvalidInput):
        Rental.book(pricey, client, DateRange(day(0), day(101)))


def test_client_email_is_validated_and_normalized():
    client = Client.register("Ana", "Lopez", " Ana@Example.COM ")

    assert client.email == "ana@example.com"
    with pytest.raises(InvalidInput):
        Client.register("Ana", "Lopez", "not-an-email")
    with pytest.raises(InvalidInput):
        Client.register("", "Lopez", "ana@example.com")


def test_deactivation_is_one_way_and_idempotent(client):
    client.clear_events()

    assert client.deactivate() is True
    assert client.deactivate() is False
    assert not client.is_active
    assert [type(e) for e in client.events] == [ClientDeactivated]


def test_cancel_is_idempotent(vehicle, client):
    rental = book(vehicle, client, 1, 3)

    assert rental.cancel() is True
    assert rental.cancel() is False
    assert not rental.is_active
    assert [type(e) for e in rental.events] == [RentalCreated, RentalCancelled]


def test_entities_compare_by_identity(vehicle):
    same = Vehicle(
        id=vehicle.id,
        chassis_number="OTHER",
        make="x",
        model="y",
        daily_rate=Money(1),
    )

    assert same == vehicle
    assert len({same, vehicle}) == 1
