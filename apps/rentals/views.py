"""API views for rentals."""

from __future__ import annotations

from uuid import UUID

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.rentals.application.commands import CancelRentalCommand, CreateRentalCommand
from shared.application.message_bus import message_bus
from shared.infrastructure import UUID_PATTERN

from .filters import RentalFilterSet
from .models import Rental
from .serializers import RentalCreateSerializer, RentalSerializer


class RentalViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Book, read and cancel rentals. Rentals are never deleted."""

    queryset = Rental.objects.select_related("vehicle", "client").all()
    serializer_class = RentalSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend]
    filterset_class = RentalFilterSet
    lookup_value_regex = UUID_PATTERN

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = RentalCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        rental = message_bus.handle_command(CreateRentalCommand(
            vehicle_id=data["vehicle"],
            client_id=data["client"],
            start_date=data["start_date"],
            end_date=data["end_date"],
        ))
        instance = self.get_queryset().get(pk=rental.id)
        return Response(RentalSerializer(instance).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["put"], url_path="cancellation")
    def cancellation(self, request, pk=None):  # type: ignore
        message_bus.handle_command(CancelRentalCommand(rental_id=UUID(pk)))
        return Response(status=status.HTTP_204_NO_CONTENT)
