"""Vehicle persistence model."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Vehicle(models.Model):
    """Rentable vehicle. Never hard-deleted, deactivation clears ``is_active``."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    chassis_number = models.CharField(
        max_length=64,
        unique=True,
        help_text=_("Unique across all vehicles, also deactivated ones."),
    )
    make = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    daily_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Vehicle")
        verbose_name_plural = _("Vehicles")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(daily_rate__gt=0),
                name="vehicle_positive_daily_rate",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.make} {self.model} ({self.chassis_number})"
