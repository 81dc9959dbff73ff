"""Email address confirmation command."""

from protean.fields import Identifier, String

from customers.domain import customers


@customers.command(part_of="Customer")
class ConfirmCustomerEmailAddress:
    """Confirm the customer's current email address with the hash sent to it."""

    customer_id = Identifier(required=True)
    confirmation_hash = String(required=True)
