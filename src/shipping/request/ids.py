"""Identifiers for shipment requests and their statuses.

Request IDs are the first letter of the sender's name, the year and month
of registration, and a 16-digit sequence number:
    "A" + "202401" + "0000000000000001"

Status IDs prefix the request ID with "S" and suffix it with the 3-digit,
1-based position of the status in the request's history:
    "SA2024010000000000000001-001"
"""

import threading
from datetime import datetime


class RequestSequence:
    """Monotonic counter behind request IDs.

    Owned by a single `ShippingService` by default. Pass the same instance to
    several services when they must share one ID namespace.
    """

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        return self._value

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value


def request_id_for(sender_name: str, moment: datetime, sequence_number: int) -> str:
    return f"{sender_name[0]}{moment.year:04d}{moment.month:02d}{sequence_number:016d}"


def status_id_for(request_id: str, position: int) -> str:
    return f"S{request_id}-{position:03d}"
