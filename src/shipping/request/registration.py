"""Shipment request registration — command and handler."""

from protean import handle
from protean.fields import Integer, Text

from shipping.domain import shipping
from shipping.request.request import ShipmentRequest
from shipping.service import get_shipping_service


@shipping.command(part_of="ShipmentRequest")
class RegisterShipmentRequest:
    """Register a new shipment request and price it.

    Fields are left optional here; the service reports the first empty one.
    """

    receiver_name = Text(sanitize=False)
    sender_name = Text(sanitize=False)
    destination_address = Text(sanitize=False)
    send_cost = Integer(required=True)
    observations = Text(sanitize=False)


@shipping.command_handler(part_of=ShipmentRequest)
class RegisterShipmentRequestHandler:
    @handle(RegisterShipmentRequest)
    def register_shipment_request(self, command):
        request = get_shipping_service().register_request(
            receiver_name=command.receiver_name,
            sender_name=command.sender_name,
            destination_address=command.destination_address,
            send_cost=command.send_cost,
            observations=command.observations,
        )
        return request.id
