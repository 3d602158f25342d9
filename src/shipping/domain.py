"""Shipping bounded context — shipment requests and their status history.

Registers shipment requests with tiered commission pricing, records the
status updates reported for each shipment under a small transition guard,
and exposes the customer-facing track of a shipment.
"""

from protean.domain import Domain

from shipping.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="shipping")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
shipping = Domain(name="shipping")
