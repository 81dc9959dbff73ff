"""Customer registration command."""

from protean.fields import String

from customers.domain import customers


@customers.command(part_of="Customer")
class RegisterCustomer:
    """Register a new customer.

    The customer id and the confirmation hash are generated by the aggregate,
    never supplied by the caller.
    """

    email_address = String(required=True, max_length=254)
    given_name = String(required=True, max_length=100)
    family_name = String(required=True, max_length=100)
