"""ShipmentRequest aggregate — a shipping order and its status history.

A request is priced and identified once, at registration, and afterwards
only grows by appending statuses. Every status must be accepted by the
transition guard in `shipping.request.transitions`; statuses labelled
"internal" are recorded but left out of the public track.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, Text

from shipping.domain import shipping
from shipping.request.events import ShipmentRequestRegistered, ShipmentStatusRegistered
from shipping.request.ids import status_id_for
from shipping.request.transitions import assert_transition_allowed, is_internal


MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_track_date(moment: datetime) -> str:
    """Render a status timestamp for the public track, e.g. "Jan 05th of 2024".

    The day always carries a literal "th" suffix. Month names are English
    whatever the process locale.
    """
    return f"{MONTH_ABBREVIATIONS[moment.month - 1]} {moment.day:02d}th of {moment.year:04d}"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@shipping.value_object
class ShipmentRequestTrack:
    """A status as shown to the customer following a shipment."""

    location = Text(sanitize=False)
    formatted_date = String(required=True, max_length=50)
    status = Text(sanitize=False)
    observations = Text(sanitize=False)

    @classmethod
    def from_status(cls, record: "ShipmentStatus") -> "ShipmentRequestTrack":
        return cls(
            location=record.location,
            formatted_date=format_track_date(record.timestamp),
            status=record.status,
            observations=record.observations,
        )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@shipping.entity(part_of="ShipmentRequest", limit=-1)
class ShipmentStatus:
    """One status update recorded against a shipment request.

    Loaded without a page limit, so a reloaded request always carries its
    whole history.
    """

    id = String(identifier=True, max_length=40, sanitize=False)
    position = Integer(required=True, min_value=1)
    location = Text(sanitize=False)
    status = Text(sanitize=False)
    timestamp = DateTime(required=True)
    observations = Text(sanitize=False)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@shipping.aggregate(limit=-1)
class ShipmentRequest:
    id = String(identifier=True, max_length=40, sanitize=False)
    receiver_name = Text(required=True, sanitize=False)
    sender_name = Text(required=True, sanitize=False)
    destination_address = Text(required=True, sanitize=False)
    send_cost = Integer(required=True, min_value=0)
    total_cost = Float(required=True, min_value=0.0)
    observations = Text(sanitize=False)
    created_at = DateTime(required=True)
    status_count = Integer(default=0, min_value=0)
    statuses = HasMany(ShipmentStatus)

    @invariant.post
    def total_cost_covers_send_cost(self):
        if self.total_cost is None or self.send_cost is None:
            return
        if self.total_cost < self.send_cost:
            raise ValidationError({"total_cost": ["Total cost cannot be lower than the sending cost"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def register(
        cls,
        request_id: str,
        receiver_name: str,
        sender_name: str,
        destination_address: str,
        send_cost: int,
        total_cost: float,
        observations: str | None = None,
        registered_at: datetime | None = None,
    ):
        """Create a priced shipment request with an empty status history.

        Observations are kept only when non-empty.
        """
        now = registered_at or datetime.now(UTC)
        request = cls(
            id=request_id,
            receiver_name=receiver_name,
            sender_name=sender_name,
            destination_address=destination_address,
            send_cost=send_cost,
            total_cost=total_cost,
            observations=observations or None,
            created_at=now,
        )
        request.raise_(
            ShipmentRequestRegistered(
                request_id=request_id,
                receiver_name=receiver_name,
                sender_name=sender_name,
                destination_address=destination_address,
                send_cost=send_cost,
                total_cost=total_cost,
                observations=observations or None,
                registered_at=now,
            )
        )
        return request

    # -------------------------------------------------------------------
    # Status history
    # -------------------------------------------------------------------
    @property
    def history(self) -> list[ShipmentStatus]:
        """Statuses in the order they were recorded."""
        return sorted(self.statuses or [], key=lambda record: record.position)

    @property
    def last_status(self) -> ShipmentStatus | None:
        history = self.history
        return history[-1] if history else None

    def record_status(self, location: str, status: str, observations: str | None = None) -> ShipmentStatus:
        """Append a status after checking it may follow the last one recorded."""
        last = self.last_status
        prior = (last.status or "") if last else None
        assert_transition_allowed(prior, status)

        now = datetime.now(UTC)
        position = (self.status_count or 0) + 1
        record = ShipmentStatus(
            id=status_id_for(self.id, position),
            position=position,
            location=location,
            status=status,
            timestamp=now,
            observations=observations,
        )
        self.add_statuses(record)
        self.status_count = position
        self.raise_(
            ShipmentStatusRegistered(
                request_id=self.id,
                status_id=record.id,
                location=location,
                status=status,
                observations=observations,
                recorded_at=now,
            )
        )
        return record

    # -------------------------------------------------------------------
    # Tracking
    # -------------------------------------------------------------------
    def track(self) -> list[ShipmentRequestTrack]:
        """Public view of the history, without internal statuses."""
        return [ShipmentRequestTrack.from_status(record) for record in self.history if not is_internal(record.status)]
