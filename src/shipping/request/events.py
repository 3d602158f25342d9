"""Shipping domain events — immutable facts about shipment requests.

All events are past tense, versioned, and carry enough data for downstream
consumers to follow a shipment without reading the aggregate.
"""

from protean.fields import DateTime, Float, Identifier, Integer, Text

from shipping.domain import shipping


@shipping.event(part_of="ShipmentRequest")
class ShipmentRequestRegistered:
    """A shipment request was registered and priced."""

    __version__ = 1

    request_id = Identifier(required=True)
    receiver_name = Text(required=True, sanitize=False)
    sender_name = Text(required=True, sanitize=False)
    destination_address = Text(required=True, sanitize=False)
    send_cost = Integer(required=True)
    total_cost = Float(required=True)
    observations = Text(sanitize=False)
    registered_at = DateTime(required=True)


@shipping.event(part_of="ShipmentRequest")
class ShipmentStatusRegistered:
    """A status update was recorded against a shipment request."""

    __version__ = 1

    request_id = Identifier(required=True)
    status_id = Identifier(required=True)
    location = Text(sanitize=False)
    status = Text(sanitize=False)
    observations = Text(sanitize=False)
    recorded_at = DateTime(required=True)
