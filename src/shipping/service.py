"""Shipment lifecycle manager.

`ShippingService` registers shipment requests, records their status updates
and renders their public track. Request IDs come from a `RequestSequence`
owned by the service, or injected when several services must share one ID
namespace. Requests themselves live in the `ShipmentRequest` repository, so
the service has to run inside an active `shipping` domain context.

Writes are serialised by one lock shared by every service in the process,
since they all write to the same request collection. It covers the sequence
draw, request appends and status appends. Reads take no lock.
"""

import threading
from datetime import UTC, datetime

from protean.utils.globals import current_domain

from shipping.domain import logger
from shipping.exceptions import InvalidArgumentError, InvalidTransitionError, ShipmentRequestNotFoundError
from shipping.request.ids import RequestSequence, request_id_for
from shipping.request.pricing import total_cost
from shipping.request.request import ShipmentRequest, ShipmentRequestTrack, ShipmentStatus
from shipping.utils.logging import add_context, clear_context


def _validate_request(receiver_name: str, sender_name: str, destination_address: str, send_cost: int) -> None:
    for field, value, message in (
        ("receiver_name", receiver_name, "Receiver should not be empty"),
        ("sender_name", sender_name, "Sender should not be empty"),
        ("destination_address", destination_address, "Destination address should not be empty"),
    ):
        if not value:
            raise InvalidArgumentError(field, message)

    if send_cost < 0:
        raise InvalidArgumentError("send_cost", "Sending cost should be positive")


class ShippingService:
    _lock = threading.RLock()

    def __init__(self, sequence: RequestSequence | None = None):
        self.sequence = sequence or RequestSequence()

    @property
    def repository(self):
        return current_domain.repository_for(ShipmentRequest)

    def register_request(
        self,
        receiver_name: str,
        sender_name: str,
        destination_address: str,
        send_cost: int,
        observations: str | None = None,
    ) -> ShipmentRequest:
        """Price, identify and store a new shipment request.

        Raises `InvalidArgumentError` for the first empty name or address
        (receiver, sender, address) or for a negative sending cost. Nothing
        is consumed from the sequence when validation fails.
        """
        _validate_request(receiver_name, sender_name, destination_address, send_cost)
        cost = float(total_cost(send_cost))

        with self._lock:
            now = datetime.now(UTC)
            request_id = request_id_for(sender_name, now, self.sequence.next())
            request = ShipmentRequest.register(
                request_id=request_id,
                receiver_name=receiver_name,
                sender_name=sender_name,
                destination_address=destination_address,
                send_cost=send_cost,
                total_cost=cost,
                observations=observations,
                registered_at=now,
            )
            self.repository.add(request)

        add_context(request_id=request_id)
        try:
            logger.info("Shipment request registered", send_cost=send_cost, total_cost=cost)
        finally:
            clear_context("request_id")
        return request

    def register_status(
        self,
        request_id: str,
        location: str,
        status: str,
        observations: str | None = None,
    ) -> ShipmentStatus:
        """Append a status to a shipment request's history.

        Raises `ShipmentRequestNotFoundError` for an unknown request and
        `InvalidTransitionError` when the status may not follow the last one.
        """
        add_context(request_id=request_id)
        try:
            with self._lock:
                request = self.find_request(request_id)
                try:
                    record = request.record_status(location, status, observations)
                except InvalidTransitionError as exc:
                    logger.warning(
                        "Status transition rejected",
                        prior_status=exc.prior_status,
                        new_status=exc.new_status,
                    )
                    raise
                self.repository.add(request)

            logger.info("Shipment status registered", status_id=record.id, status=status)
            return record
        finally:
            clear_context("request_id")

    def track_status_of(self, request_id: str) -> list[ShipmentRequestTrack]:
        """Return the public track of a request, oldest status first."""
        return self.find_request(request_id).track()

    def find_request(self, request_id: str) -> ShipmentRequest:
        request = self.repository.find_by_id(request_id)
        if request is None:
            logger.warning("Shipment request not found", request_id=request_id)
            raise ShipmentRequestNotFoundError(request_id)
        return request


_service_instance = None


def get_shipping_service() -> ShippingService:
    """Return the process-wide default service (singleton).

    Command handlers go through this instance, so every request registered
    by commands draws from the same sequence.
    """
    global _service_instance
    if _service_instance is None:
        _service_instance = ShippingService()
    return _service_instance


def reset_shipping_service() -> None:
    """Reset the service singleton (useful for testing)."""
    global _service_instance
    _service_instance = None
