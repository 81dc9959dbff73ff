import pytest


@pytest.fixture(scope="session")
def _customers_domain():
    """Initialize the customers domain once per session."""
    from customers.domain import customers

    customers.init()
    return customers


@pytest.fixture(autouse=True)
def run_around_tests(_customers_domain):
    """Push a domain context around each test."""
    with _customers_domain.domain_context():
        yield


# ---------------------------------------------------------------------------
# Assertion messages for recorded-event expectations
# ---------------------------------------------------------------------------
def no_event_was_recorded(method, expected):
    return f"{method}: expected exactly one {expected} event to be recorded"


def event_of_wrong_type_was_recorded(method, expected, actual):
    return f"{method}: recorded {type(actual).__name__} instead of {expected}"


def property_is_wrong(method, prop):
    return f"{method}: event property {prop!r} is wrong"


def no_event_should_have_been_recorded(events):
    first = type(events[0]).__name__ if events else None
    return f"no event should have been recorded, but {first} was"


@pytest.fixture()
def expect_single_event():
    """Assert exactly one event of the given class was recorded and return it."""

    def _expect(customer, event_cls, method):
        events = customer.recorded_events
        assert len(events) == 1, no_event_was_recorded(method, event_cls.__name__)
        event = events[0]
        assert isinstance(event, event_cls), event_of_wrong_type_was_recorded(method, event_cls.__name__, event)
        return event

    return _expect


@pytest.fixture()
def expect_no_event():
    def _expect(customer):
        events = customer.recorded_events
        assert len(events) == 0, no_event_should_have_been_recorded(events)

    return _expect
