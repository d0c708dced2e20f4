"""Serializers for the client endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Client


class ClientCreateSerializer(serializers.Serializer):
    """Presence and email syntax; uniqueness is checked by the domain."""

    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    email = serializers.EmailField()


class ClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = [
            "id",
            "first_name",
            "last_name",
            "email",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
