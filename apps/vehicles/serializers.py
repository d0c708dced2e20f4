"""Serializers for the vehicle endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Vehicle


class VehicleCreateSerializer(serializers.Serializer):
    """Field-level checks only; uniqueness and rate rules live in the domain."""

    chassis_number = serializers.CharField(max_length=64)
    make = serializers.CharField(max_length=100)
    model = serializers.CharField(max_length=100)
    daily_rate = serializers.DecimalField(max_digits=10, decimal_places=2)


class VehicleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Vehicle
        fields = [
            "id",
            "chassis_number",
            "make",
            "model",
            "daily_rate",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
