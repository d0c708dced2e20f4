"""API views for vehicles."""

from __future__ import annotations

from uuid import UUID

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.rentals.application.commands import DeactivateVehicleCommand, RegisterVehicleCommand
from shared.application.message_bus import message_bus
from shared.infrastructure import UUID_PATTERN

from .models import Vehicle
from .serializers import VehicleCreateSerializer, VehicleSerializer


class VehicleViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Register, read and deactivate vehicles. DELETE is a soft delete."""

    queryset = Vehicle.objects.all()
    serializer_class = VehicleSerializer
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = UUID_PATTERN

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = VehicleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        vehicle = message_bus.handle_command(RegisterVehicleCommand(**serializer.validated_data))
        instance = Vehicle.objects.get(pk=vehicle.id)
        return Response(VehicleSerializer(instance).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        message_bus.handle_command(DeactivateVehicleCommand(vehicle_id=UUID(pk)))
        return Response(status=status.HTTP_204_NO_CONTENT)
