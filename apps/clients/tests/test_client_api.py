"""Integration tests for client API endpoints."""

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


class ClientAPITests(APITestCase):
    """Covers registration and soft deletion of clients."""

    def setUp(self) -> None:
        self.list_url = reverse("client-list")
        self.payload = {
            "first_name": "Ana",
            "last_name": "Lopez",
            "email": "Ana.Lopez@Example.com",
        }

    def _create(self, **overrides):
        return self.client.post(self.list_url, {**self.payload, **overrides}, format="json")

    def test_register_client_normalizes_email(self) -> None:
        response = self._create()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["email"], "ana.lopez@example.com")
        self.assertTrue(Client.objects.get(pk=response.data["id"]).is_active)

    def test_duplicate_email_is_rejected_ignoring_case(self) -> None:
        self._create()

        response = self._create(email="ANA.LOPEZ@example.com")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "already_exists")

    def test_invalid_email_is_rejected(self) -> None:
        response = self._create(email="not-an-email")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("email", response.data)

    def test_delete_is_soft_and_idempotent(self) -> None:
        created = self._create()
        detail_url = reverse("client-detail", args=[created.data["id"]])

        self.assertEqual(self.client.delete(detail_url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.delete(detail_url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Client.objects.get(pk=created.data["id"]).is_active)

    def test_client_with_upcoming_rental_cannot_be_deleted(self) -> None:
        created = self._create()
        vehicle = Vehicle.objects.create(
            chassis_number="JTDBR32E720000001", make="Toyota", model="Corolla", daily_rate=Decimal("10.00"),
        )
        start = timezone.localdate() + timedelta(days=3)
        Rental.objects.create(
            vehicle=vehicle,
            client_id=created.data["id"],
            start_date=start,
            end_date=start + timedelta(days=1),
            charge=Decimal("10.00"),
        )

        response = self.client.delete(reverse("client-detail", args=[created.data["id"]]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "client_has_active_rental")

    def test_elapsed_rental_does_not_block_delete(self) -> None:
        created = self._create()
        vehicle = Vehicle.objects.create(
            chassis_number="JTDBR32E720000001", make="Toyota", model="Corolla", daily_rate=Decimal("10.00"),
        )
        end = timezone.localdate() - timedelta(days=1)
        Rental.objects.create(
            vehicle=vehicle,
            client_id=created.data["id"],
            start_date=end - timedelta(days=2),
            end_date=end,
            charge=Decimal("20.00"),
        )

        response = self.client.delete(reverse("client-detail", args=[created.data["id"]]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_delete_unknown_client_returns_404(self) -> None:
        response = self.client.delete(reverse("client-detail", args=[uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
