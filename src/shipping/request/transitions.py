"""Status transition guard for shipment requests.

Status labels are free-form, compared case-insensitively. Three labels
carry meaning for the guard; every other label closes the shipment.

State Machine (category of the last recorded status):
    NONE   → any status
    OPEN   ("internal", "in transit") → any status
    HOLD   ("on hold") → "in transit" only
    CLOSED (any other label) → nothing, not even itself
"""

from enum import Enum

from shipping.exceptions import InvalidTransitionError

INTERNAL = "internal"
IN_TRANSIT = "in transit"
ON_HOLD = "on hold"


class StatusCategory(Enum):
    NONE = "None"
    OPEN = "Open"
    HOLD = "Hold"
    CLOSED = "Closed"


# None means any status is accepted
_ALLOWED_NEXT = {
    StatusCategory.NONE: None,
    StatusCategory.OPEN: None,
    StatusCategory.HOLD: frozenset({IN_TRANSIT}),
    StatusCategory.CLOSED: frozenset(),
}


def normalize(status: str | None) -> str:
    return (status or "").lower()


def category_of(status: str | None) -> StatusCategory:
    """Return the category of a recorded status; `None` means nothing was recorded yet."""
    if status is None:
        return StatusCategory.NONE

    label = normalize(status)
    if label in (INTERNAL, IN_TRANSIT):
        return StatusCategory.OPEN
    if label == ON_HOLD:
        return StatusCategory.HOLD
    return StatusCategory.CLOSED


def is_transition_allowed(prior_status: str | None, new_status: str) -> bool:
    allowed = _ALLOWED_NEXT[category_of(prior_status)]
    return allowed is None or normalize(new_status) in allowed


def assert_transition_allowed(prior_status: str | None, new_status: str) -> None:
    if not is_transition_allowed(prior_status, new_status):
        raise InvalidTransitionError(prior_status, new_status)


def is_internal(status: str | None) -> bool:
    """Internal statuses are recorded but never shown on the public track."""
    return normalize(status) == INTERNAL
