"""EmailAddress value object."""

from protean import invariant
from protean.fields import String

from customers.domain import customers

_FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _is_ip_literal(domain_part: str) -> bool:
    return domain_part.startswith("[") and domain_part.endswith("]")


def _problem_with(email: str) -> str | None:
    """Return a description of the first structural problem found, or None."""
    if any(ws in email for ws in (" ", "\t", "\n")):
        return "contains whitespace"

    if email.count("@") != 1:
        return "must contain exactly one @"

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part[0] == "." or local_part[-1] == ".":
        return "local part is empty or starts/ends with a dot"

    if not domain_part or domain_part[0] == "." or domain_part[-1] == ".":
        return "domain is empty or starts/ends with a dot"

    if ".." in local_part or ".." in domain_part:
        return "contains consecutive dots"

    if _is_ip_literal(domain_part):
        forbidden = [c for c in _FORBIDDEN_CHARACTERS if c in email and c not in "[]"]
    else:
        if "." not in domain_part:
            return "domain must contain a dot"
        if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
            return "domain label starts or ends with a hyphen"
        forbidden = [c for c in _FORBIDDEN_CHARACTERS if c in email]

    if forbidden:
        return f"contains forbidden character {forbidden[0]!r}"

    return None


@customers.value_object
class EmailAddress:
    """A structurally valid email address.

    Two addresses are the same address when their strings are equal; no case
    folding or normalisation is applied.
    """

    address = String(required=True, max_length=254)

    @invariant.post
    def address_is_well_formed(self):
        problem = _problem_with(self.address)
        if problem:
            raise ValueError(f"Invalid email address {self.address!r}: {problem}")

    def __str__(self):
        return self.address
