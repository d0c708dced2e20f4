"""API views for clients."""

from __future__ import annotations

from uuid import UUID

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.rentals.application.commands import DeactivateClientCommand, RegisterClientCommand
from shared.application.message_bus import message_bus
from shared.infrastructure import UUID_PATTERN

from .models import Client
from .serializers import ClientCreateSerializer, ClientSerializer


class ClientViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Register, read and deactivate clients. DELETE is a soft delete."""

    queryset = Client.objects.all()
    serializer_class = ClientSerializer
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = UUID_PATTERN

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = ClientCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        client = message_bus.handle_command(RegisterClientCommand(**serializer.validated_data))
        instance = Client.objects.get(pk=client.id)
        return Response(ClientSerializer(instance).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        message_bus.handle_command(DeactivateClientCommand(client_id=UUID(pk)))
        return Response(status=status.HTTP_204_NO_CONTENT)
