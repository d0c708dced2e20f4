"""
Message bus wiring for the rental domain.

Called from ``RentalsConfig.ready()``: every command gets its
RentalService method as handler and every domain event is written to
the audit log.
"""

from __future__ import annotations

from shared.application.message_bus import MessageBus, message_bus
from shared.application.uow import DjangoUnitOfWork

from apps.rentals.application import commands
from apps.rentals.application.handlers import record_audit_entry
from apps.rentals.application.service import RentalService
from apps.rentals.domain import events


def bootstrap(bus: MessageBus = message_bus, service: RentalService | None = None) -> MessageBus:
    if bus.has_command_handler(commands.CreateRentalCommand):
        return bus

    service = service or RentalService(uow_factory=lambda: DjangoUnitOfWork(bus))

    bus.register_command_handler(commands.RegisterVehicleCommand, service.register_vehicle)
    bus.register_command_handler(commands.DeactivateVehicleCommand, service.deactivate_vehicle)
    bus.register_command_handler(commands.RegisterClientCommand, service.register_client)
    bus.register_command_handler(commands.DeactivateClientCommand, service.deactivate_client)
    bus.register_command_handler(commands.CreateRentalCommand, service.create_rental)
    bus.register_command_handler(commands.CancelRentalCommand, service.cancel_rental)

    for event_type in (
        events.VehicleRegistered,
        events.VehicleDeactivated,
        events.ClientRegistered,
        events.ClientDeactivated,
        events.RentalCreated,
        events.RentalCancelled,
    ):
        bus.register_event_handler(event_type, record_audit_entry)

    return bus
