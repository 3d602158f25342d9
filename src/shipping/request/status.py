"""Shipment status registration — command and handler.

Processes status updates reported for a shipment, e.g. by a carrier webhook.
"""

from protean import handle
from protean.fields import Identifier, Text

from shipping.domain import shipping
from shipping.request.request import ShipmentRequest
from shipping.service import get_shipping_service


@shipping.command(part_of="ShipmentRequest")
class RegisterShipmentStatus:
    """Record a status update against a shipment request."""

    request_id = Identifier(required=True)
    location = Text(sanitize=False)
    status = Text(required=True, sanitize=False)
    observations = Text(sanitize=False)


@shipping.command_handler(part_of=ShipmentRequest)
class RegisterShipmentStatusHandler:
    @handle(RegisterShipmentStatus)
    def register_shipment_status(self, command):
        record = get_shipping_service().register_status(
            request_id=command.request_id,
            location=command.location,
            status=command.status,
            observations=command.observations,
        )
        return record.id
