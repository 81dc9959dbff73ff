"""Email address change command."""

from protean.fields import Identifier, String

from customers.domain import customers


@customers.command(part_of="Customer")
class ChangeCustomerEmailAddress:
    customer_id = Identifier(required=True)
    email_address = String(required=True, max_length=254)
