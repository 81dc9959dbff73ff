"""Domain events for the Customer aggregate.

Events are immutable facts and the only source of Customer state. Payloads hold
plain values so the stream can be stored and replayed verbatim, per customer id,
in the order the events were raised.
"""

from protean.fields import Identifier, String

from customers.domain import customers


@customers.event(part_of="Customer")
class CustomerRegistered:
    """A customer registered with an email address awaiting confirmation."""

    __version__ = 1

    customer_id = Identifier(required=True)
    email_address = String(required=True, max_length=254)
    confirmation_hash = String(required=True, max_length=128)
    given_name = String(required=True, max_length=100)
    family_name = String(required=True, max_length=100)


@customers.event(part_of="Customer")
class CustomerEmailAddressConfirmed:
    """The customer proved control of the current email address."""

    __version__ = 1

    customer_id = Identifier(required=True)


@customers.event(part_of="Customer")
class CustomerEmailAddressConfirmationFailed:
    """A confirmation was attempted with a hash that does not match the current one."""

    __version__ = 1

    customer_id = Identifier(required=True)


@customers.event(part_of="Customer")
class CustomerEmailAddressChanged:
    """The customer switched to a new email address, which needs confirming again."""

    __version__ = 1

    customer_id = Identifier(required=True)
    email_address = String(required=True, max_length=254)
    confirmation_hash = String(required=True, max_length=128)
