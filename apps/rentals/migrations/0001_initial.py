import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("clients", "0001_initial"),
        ("vehicles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Rental",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                (
                    "charge",
                    models.DecimalField(
                        decimal_places=2,
                        editable=False,
                        help_text="Daily rate at booking time times number of days.",
                        max_digits=12,
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "client",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="rentals",
                        to="clients.client",
                    ),
                ),
                (
                    "vehicle",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="rentals",
                        to="vehicles.vehicle",
                    ),
                ),
            ],
            options={
                "verbose_name": "Rental",
                "verbose_name_plural": "Rentals",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["vehicle", "start_date", "end_date"], name="rental_vehicle_dates_idx"),
                    models.Index(fields=["client", "end_date"], name="rental_client_end_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("end_date__gt", models.F("start_date"))),
                        name="rental_valid_dates",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("charge__gte", 0)),
                        name="rental_non_negative_charge",
                    ),
                ],
            },
        ),
    ]
