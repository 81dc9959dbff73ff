"""Customers bounded context: registration and email address confirmation.

The Customer aggregate is event sourced: its state is rebuilt by replaying
domain events through @apply handlers, and every change is raised as a new event.
"""

from protean.domain import Domain

from customers.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

customers = Domain(name="customers")
