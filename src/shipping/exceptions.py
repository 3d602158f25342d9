"""Errors raised by the Shipping domain.

They extend Protean's exception hierarchy, so callers that already handle
`ValidationError` and `ObjectNotFoundError` handle these as well.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class InvalidArgumentError(ValidationError):
    """A shipment request was submitted with a missing or out-of-range value."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__({field: [message]})


class InvalidTransitionError(ValidationError):
    """A status cannot follow the last status recorded for a shipment."""

    def __init__(self, prior_status: str, new_status: str):
        self.prior_status = prior_status
        self.new_status = new_status
        super().__init__({"status": [f"Cannot transition from {prior_status} to {new_status}"]})


class ShipmentRequestNotFoundError(ObjectNotFoundError):
    """No shipment request is registered under the requested ID."""

    def __init__(self, request_id: str):
        self.request_id = request_id
        super().__init__({"_entity": f"Shipment request `{request_id}` was not found"})
