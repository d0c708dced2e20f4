"""Rental persistence model."""

from __future__ import annotations

import uuid

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Rental(models.Model):
    """Booking of one vehicle by one client. Cancelling clears ``is_active``."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vehicle = models.ForeignKey(
        "vehicles.Vehicle",
        on_delete=models.PROTECT,
        related_name="rentals",
    )
    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.PROTECT,
        related_name="rentals",
    )
    start_date = models.DateField()
    end_date = models.DateField()
    charge = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        editable=False,
        help_text=_("Daily rate at booking time times number of days."),
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Rental")
        verbose_name_plural = _("Rentals")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="rental_valid_dates",
            ),
            models.CheckConstraint(
                condition=models.Q(charge__gte=0),
                name="rental_non_negative_charge",
            ),
        ]
        indexes = [
            models.Index(fields=["vehicle", "start_date", "end_date"], name="rental_vehicle_dates_idx"),
            models.Index(fields=["client", "end_date"], name="rental_client_end_idx"),
        ]

    def __str__(self) -> str:
        return f"Rental {self.id} of {self.vehicle_id} ({self.start_date} - {self.end_date})"
