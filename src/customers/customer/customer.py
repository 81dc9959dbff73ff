"""Customer aggregate (Event Sourced) with ConfirmationHash and PersonName value objects.

A Customer registers with an email address that must be confirmed by presenting
the confirmation hash issued for that address. Changing the address issues a new
hash and withdraws any earlier confirmation, so a hash only ever confirms the
address it was issued for.

Command methods decide which event (if any) to raise; all state changes happen
in the @apply handlers, which are also what `reconstitute` replays.

Confirmation outcomes:
    not confirmed + matching hash  -> CustomerEmailAddressConfirmed
    not confirmed + wrong hash     -> CustomerEmailAddressConfirmationFailed
    confirmed     + matching hash  -> no event
    confirmed     + wrong hash     -> CustomerEmailAddressConfirmationFailed
"""

import secrets
from collections.abc import Sequence

import structlog
from protean import apply, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, String, ValueObject

from customers.customer.confirmation import ConfirmCustomerEmailAddress
from customers.customer.email_change import ChangeCustomerEmailAddress
from customers.customer.events import (
    CustomerEmailAddressChanged,
    CustomerEmailAddressConfirmationFailed,
    CustomerEmailAddressConfirmed,
    CustomerRegistered,
)
from customers.customer.registration import RegisterCustomer
from customers.domain import customers
from customers.shared.email import EmailAddress

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@customers.value_object(part_of="Customer")
class ConfirmationHash:
    """Opaque random token that authorizes confirming one email address."""

    value = String(required=True, max_length=128)

    @classmethod
    def generate(cls) -> "ConfirmationHash":
        return cls(value=secrets.token_hex(32))


@customers.value_object(part_of="Customer")
class PersonName:
    given_name = String(required=True, max_length=100)
    family_name = String(required=True, max_length=100)

    @invariant.post
    def name_parts_are_not_blank(self):
        for field_name in ("given_name", "family_name"):
            value = getattr(self, field_name)
            if value is None or not value.strip():
                raise ValidationError({field_name: ["must not be blank"]})


# ---------------------------------------------------------------------------
# Aggregate Root (Event Sourced)
# ---------------------------------------------------------------------------
@customers.aggregate(is_event_sourced=True)
class Customer:
    email_address = ValueObject(EmailAddress)
    confirmation_hash = ValueObject(ConfirmationHash)
    is_email_address_confirmed = Boolean(default=False)
    name = ValueObject(PersonName)

    # -------------------------------------------------------------------
    # Factory methods
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, command: RegisterCustomer) -> "Customer":
        """Register a new customer from a RegisterCustomer command.

        The id and confirmation hash are generated here. Value objects are built
        before any event is raised, so invalid input raises ValidationError and
        leaves nothing recorded.
        """
        email_address = EmailAddress(address=command.email_address)
        name = PersonName(given_name=command.given_name, family_name=command.family_name)
        confirmation_hash = ConfirmationHash.generate()

        customer = cls._create_new()
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer.id),
                email_address=email_address.address,
                confirmation_hash=confirmation_hash.value,
                given_name=name.given_name,
                family_name=name.family_name,
            )
        )
        logger.info("Customer registered", customer_id=str(customer.id))
        return customer

    @classmethod
    def reconstitute(cls, history: Sequence) -> "Customer":
        """Rebuild a customer by replaying its events, oldest first.

        Replay goes through the same @apply handlers as live changes and
        records no new events.
        """
        if not history:
            raise ValidationError({"history": ["Cannot reconstitute a customer without events"]})
        if not isinstance(history[0], CustomerRegistered):
            raise ValidationError({"history": ["History must start with CustomerRegistered"]})

        return cls.from_events(list(history))

    @property
    def recorded_events(self) -> list:
        """Events raised on this instance since it was constructed, oldest first."""
        return list(self._events)

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    def _assert_addressed_to_me(self, command) -> None:
        if str(command.customer_id) != str(self.id):
            raise ValidationError(
                {"customer_id": [f"Command for customer {command.customer_id} sent to customer {self.id}"]}
            )

    def confirm_email_address(self, command: ConfirmCustomerEmailAddress) -> None:
        """Confirm the current email address with the presented hash."""
        self._assert_addressed_to_me(command)

        if command.confirmation_hash != self.confirmation_hash.value:
            logger.warning(
                "Email address confirmation failed",
                customer_id=str(self.id),
                already_confirmed=self.is_email_address_confirmed,
            )
            self.raise_(CustomerEmailAddressConfirmationFailed(customer_id=str(self.id)))
            return

        if self.is_email_address_confirmed:
            logger.debug("Email address already confirmed", customer_id=str(self.id))
            return

        self.raise_(CustomerEmailAddressConfirmed(customer_id=str(self.id)))
        logger.info("Email address confirmed", customer_id=str(self.id))

    def change_email_address(self, command: ChangeCustomerEmailAddress) -> None:
        """Switch to a new email address, issuing a fresh confirmation hash."""
        self._assert_addressed_to_me(command)

        email_address = EmailAddress(address=command.email_address)
        if email_address == self.email_address:
            logger.debug("Email address unchanged", customer_id=str(self.id))
            return

        self.raise_(
            CustomerEmailAddressChanged(
                customer_id=str(self.id),
                email_address=email_address.address,
                confirmation_hash=ConfirmationHash.generate().value,
            )
        )

    # -------------------------------------------------------------------
    # @apply methods: rebuild state during event replay
    # -------------------------------------------------------------------
    @apply
    def _on_customer_registered(self, event: CustomerRegistered):
        self.id = event.customer_id
        self.email_address = EmailAddress(address=event.email_address)
        self.confirmation_hash = ConfirmationHash(value=event.confirmation_hash)
        self.name = PersonName(given_name=event.given_name, family_name=event.family_name)
        self.is_email_address_confirmed = False

    @apply
    def _on_email_address_confirmed(self, event: CustomerEmailAddressConfirmed):
        self.is_email_address_confirmed = True

    @apply
    def _on_email_address_confirmation_failed(self, event: CustomerEmailAddressConfirmationFailed):
        """An outcome only; the customer's state does not change."""

    @apply
    def _on_email_address_changed(self, event: CustomerEmailAddressChanged):
        self.email_address = EmailAddress(address=event.email_address)
        self.confirmation_hash = ConfirmationHash(value=event.confirmation_hash)
        self.is_email_address_confirmed = False
