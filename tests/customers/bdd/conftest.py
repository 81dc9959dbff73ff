"""Shared BDD fixtures and step definitions for the Customers domain.

Given steps build an event history, When steps rebuild the customer from that
history and issue one command, Then steps inspect the recorded events.
"""

from uuid import uuid4

import pytest
from customers.customer.customer import ConfirmationHash
from customers.customer.events import (
    CustomerEmailAddressChanged,
    CustomerEmailAddressConfirmationFailed,
    CustomerEmailAddressConfirmed,
    CustomerRegistered,
)
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup
_EVENT_CLASSES = {
    "CustomerRegistered": CustomerRegistered,
    "CustomerEmailAddressConfirmed": CustomerEmailAddressConfirmed,
    "CustomerEmailAddressConfirmationFailed": CustomerEmailAddressConfirmationFailed,
    "CustomerEmailAddressChanged": CustomerEmailAddressChanged,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def story():
    """Identifiers, hashes and event history shared by the steps of one scenario."""
    return {
        "customer_id": str(uuid4()),
        "confirmation_hash": ConfirmationHash.generate().value,
        "wrong_confirmation_hash": ConfirmationHash.generate().value,
        "changed_confirmation_hash": ConfirmationHash.generate().value,
        "history": [],
        "customer": None,
    }


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a customer registered with email "{email}"'))
def customer_registered(story, email):
    story["history"].append(
        CustomerRegistered(
            customer_id=story["customer_id"],
            email_address=email,
            confirmation_hash=story["confirmation_hash"],
            given_name="John",
            family_name="Doe",
        )
    )


@given("the email address was confirmed")
def email_address_was_confirmed(story):
    story["history"].append(CustomerEmailAddressConfirmed(customer_id=story["customer_id"]))


@given(parsers.cfparse('the email address was changed to "{email}"'))
def email_address_was_changed(story, email):
    story["history"].append(
        CustomerEmailAddressChanged(
            customer_id=story["customer_id"],
            email_address=email,
            confirmation_hash=story["changed_confirmation_hash"],
        )
    )


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then(parsers.cfparse("a {event_name} event is recorded"))
def single_event_recorded(story, event_name, expect_single_event):
    event = expect_single_event(story["customer"], _EVENT_CLASSES[event_name], event_name)
    assert event.customer_id == str(story["customer"].id)


@then("no event is recorded")
def no_event_recorded(story, expect_no_event):
    expect_no_event(story["customer"])


@then("the email address is confirmed")
def email_address_is_confirmed(story):
    assert story["customer"].is_email_address_confirmed is True


@then("the email address is not confirmed")
def email_address_is_not_confirmed(story):
    assert story["customer"].is_email_address_confirmed is False
