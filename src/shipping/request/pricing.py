"""Tiered commission pricing for shipment requests.

A commission is applied to the sending cost according to the tier it falls
in, then tax is applied on top. Lower tiers add a flat fee; the top two
tiers apply a percentage instead. Tier bounds are inclusive below and
exclusive above.

Arithmetic runs on `Decimal` so the result carries no binary rounding
drift; no rounding is applied to the result.
"""

from decimal import Decimal

TAX_RATE = Decimal("1.18")

# (exclusive upper bound, flat fee added to the sending cost)
FLAT_COMMISSION_TIERS = (
    (20, Decimal("3")),
    (100, Decimal("8")),
    (300, Decimal("17")),
    (500, Decimal("20")),
    (1000, Decimal("50")),
)

# (exclusive upper bound, multiplier applied to the sending cost)
PERCENTAGE_COMMISSION_TIERS = ((10000, Decimal("1.05")),)

TOP_TIER_MULTIPLIER = Decimal("1.03")


def commissioned_cost(send_cost: int) -> Decimal:
    """Return the sending cost with the commission of its tier applied."""
    if send_cost < 0:
        raise ValueError(f"Sending cost should be positive, got {send_cost}")

    amount = Decimal(send_cost)
    for upper_bound, fee in FLAT_COMMISSION_TIERS:
        if send_cost < upper_bound:
            return amount + fee
    for upper_bound, multiplier in PERCENTAGE_COMMISSION_TIERS:
        if send_cost < upper_bound:
            return amount * multiplier
    return amount * TOP_TIER_MULTIPLIER


def total_cost(send_cost: int) -> Decimal:
    """Return the final cost of a shipment: commission first, then tax."""
    return commissioned_cost(send_cost) * TAX_RATE
