"""
Rental Event Handlers

Audit trail for committed domain events. Handlers run after commit, so
a failing handler never undoes a booking.
"""

import structlog

from shared.domain.base import DomainEvent

audit_logger = structlog.get_logger("apps.rentals.audit")


def record_audit_entry(event: DomainEvent) -> None:
    """Write one structured audit line per committed event"""
    payload = event.to_dict()
    audit_logger.info(payload.pop("event_type"), **payload)
