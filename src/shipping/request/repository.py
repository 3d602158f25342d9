"""Repository for the ShipmentRequest aggregate."""

from shipping.domain import shipping
from shipping.request.request import ShipmentRequest


@shipping.repository(part_of=ShipmentRequest)
class ShipmentRequestRepository:
    """Collection of registered shipment requests.

    The base repository covers `add` (both new requests and newly appended
    statuses) and `get`. Lookups here return `None` instead of raising.
    """

    def find_by_id(self, request_id: str) -> ShipmentRequest | None:
        """Find a request by its exact, case-sensitive ID."""
        return self._dao.query.filter(id=request_id).all().first

    def find_by_sender(self, sender_name: str) -> list[ShipmentRequest]:
        """Find all requests sent by `sender_name`."""
        return self._dao.query.filter(sender_name=sender_name).all().items
