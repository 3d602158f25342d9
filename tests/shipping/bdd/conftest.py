"""Shared BDD fixtures and step definitions for the Shipping domain."""

import pytest
from pytest_bdd import given, parsers, then, when
from shipping.exceptions import InvalidTransitionError, ShipmentRequestNotFoundError
from shipping.service import ShippingService


@pytest.fixture()
def service():
    return ShippingService()


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered shipment request", target_fixture="shipment")
def registered_shipment(service):
    return service.register_request("Alice", "Bob", "221B Baker Street", 50)


@given(
    parsers.cfparse('a shipment request whose last status is "{status}"'),
    target_fixture="shipment",
)
def shipment_with_last_status(service, status):
    shipment = service.register_request("Alice", "Bob", "221B Baker Street", 50)
    service.register_status(shipment.id, "Warehouse", status)
    return shipment


@given(
    parsers.cfparse('a shipment request with {count:d} statuses "{status}"'),
    target_fixture="shipment",
)
def shipment_with_statuses(service, count, status):
    shipment = service.register_request("Alice", "Bob", "221B Baker Street", 50)
    for _ in range(count):
        service.register_status(shipment.id, "Warehouse", status)
    return shipment


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('status "{status}" is registered at "{location}"'))
def register_status(service, shipment, status, location):
    service.register_status(shipment.id, location, status)


@when(parsers.cfparse('status "{status}" is attempted at "{location}"'))
def attempt_status(service, shipment, status, location, error):
    try:
        service.register_status(shipment.id, location, status)
    except InvalidTransitionError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the last status is "{status}"'))
def last_status_is(service, shipment, status):
    assert service.find_request(shipment.id).last_status.status == status


@then(parsers.cfparse('the status is rejected as a transition from "{prior}" to "{new}"'))
def status_rejected(error, prior, new):
    exc = error["exc"]
    assert isinstance(exc, InvalidTransitionError)
    assert exc.prior_status == prior
    assert exc.new_status == new


@then(parsers.cfparse("the history holds {count:d} statuses"))
def history_length(service, shipment, count):
    assert len(service.find_request(shipment.id).history) == count


@then("the request is reported as not found")
def request_not_found(error):
    assert isinstance(error["exc"], ShipmentRequestNotFoundError)
