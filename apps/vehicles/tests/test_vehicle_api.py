"""Integration tests for vehicle API endpoints."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.clients.models import Client
from apps.rentals.models import Rental
from apps.vehicles.models import Vehicle


class VehicleAPITests(APITestCase):
    """Covers registration, listing and soft deletion of vehicles."""

    def setUp(self) -> None:
        self.list_url = reverse("vehicle-list")
        self.payload = {
            "chassis_number": "JTDBR32E720000001",
            "make": "Toyota",
            "model": "Corolla",
            "daily_rate": "45.50",
        }

    def _create(self, **overrides):
        return self.client.post(self.list_url, {**self.payload, **overrides}, format="json")

    def test_register_vehicle(self) -> None:
        response = self._create()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["daily_rate"], "45.50")
        self.assertTrue(response.data["is_active"])
        vehicle = Vehicle.objects.get(pk=response.data["id"])
        self.assertEqual(vehicle.chassis_number, "JTDBR32E720000001")

    def test_duplicate_chassis_number_is_rejected(self) -> None:
        self._create()

        response = self._create(make="Honda")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "already_exists")
        self.assertEqual(Vehicle.objects.count(), 1)

    def test_zero_daily_rate_is_rejected(self) -> None:
        response = self._create(daily_rate="0")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "invalid_input")
        self.assertFalse(Vehicle.objects.exists())

    def test_blank_make_is_rejected(self) -> None:
        response = self._create(make="")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("make", response.data)

    def test_list_and_retrieve(self) -> None:
        created = self._create()

        listing = self.client.get(self.list_url)
        detail = self.client.get(reverse("vehicle-detail", args=[created.data["id"]]))

        self.assertEqual(listing.status_code, status.HTTP_200_OK)
        self.assertEqual(listing.data["count"], 1)
        self.assertEqual(detail.status_code, status.HTTP_200_OK)
        self.assertEqual(detail.data["model"], "Corolla")

    def test_delete_is_soft_and_idempotent(self) -> None:
        created = self._create()
        detail_url = reverse("vehicle-detail", args=[created.data["id"]])

        first = self.client.delete(detail_url)
        second = self.client.delete(detail_url)

        self.assertEqual(first.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(second.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Vehicle.objects.get(pk=created.data["id"]).is_active)

    def test_rented_vehicle_cannot_be_deleted(self) -> None:
        created = self._create()
        renter = Client.objects.create(first_name="Ana", last_name="Lopez", email="ana@example.com")
        today = timezone.localdate()
        Rental.objects.create(
            vehicle_id=created.data["id"],
            client=renter,
            start_date=today,
            end_date=today + timedelta(days=2),
            charge=Decimal("91.00"),
        )

        response = self.client.delete(reverse("vehicle-detail", args=[created.data["id"]]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "vehicle_in_use")
        self.assertTrue(Vehicle.objects.get(pk=created.data["id"]).is_active)

    def test_delete_unknown_vehicle_returns_404(self) -> None:
        response = self.client.delete(reverse("vehicle-detail", args=[uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["code"], "not_found")
