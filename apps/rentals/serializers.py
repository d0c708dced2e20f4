"""Serializers for the rental endpoints."""

from __future__ import annotations

from django.utils.dateparse import parse_datetime  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import Rental


class CalendarDateField(serializers.DateField):
    """DateField that also accepts datetimes and keeps only their date."""

    def to_internal_value(self, value):  # type: ignore
        if isinstance(value, str) and ("T" in value or " " in value.strip()):
            parsed = parse_datetime(value.strip())
            if parsed is not None:
                return parsed.date()
        return super().to_internal_value(value)


class RentalCreateSerializer(serializers.Serializer):
    """
    Booking request. Only format is checked here; date ordering, past
    dates, availability and the charge are the domain's business.
    """

    vehicle = serializers.UUIDField()
    client = serializers.UUIDField()
    start_date = CalendarDateField()
    end_date = CalendarDateField()


class RentalSerializer(serializers.ModelSerializer):
    vehicle_id = serializers.ReadOnlyField(source="vehicle.id")
    client_id = serializers.ReadOnlyField(source="client.id")
    chassis_number = serializers.ReadOnlyField(source="vehicle.chassis_number")
    client_email = serializers.ReadOnlyField(source="client.email")
    days = serializers.SerializerMethodField()

    class Meta:
        model = Rental
        fields = [
            "id",
            "vehicle_id",
            "chassis_number",
            "client_id",
            "client_email",
            "start_date",
            "end_date",
            "days",
            "charge",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_days(self, obj: Rental) -> int:
        return (obj.end_date - obj.start_date).days
