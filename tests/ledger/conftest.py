from datetime import UTC, datetime

import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ledger_bed():
    from ledger.domain import ledger

    bed = DomainFixture(ledger)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ledger_bed):
    from ledger.clock import reset_clock

    with ledger_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_clock()


@pytest.fixture
def clock():
    from ledger.clock import ManualClock, set_clock

    manual = ManualClock()
    set_clock(manual)
    return manual


@pytest.fixture
def register_user():
    from ledger.projections.registries import RegisteredUser

    def _register(user_id):
        current_domain.repository_for(RegisteredUser).add(
            RegisteredUser(user_id=user_id, registered_at=datetime.now(UTC))
        )

    return _register


@pytest.fixture
def register_location():
    from ledger.projections.registries import RegisteredLocation

    def _register(location_id, name=None):
        current_domain.repository_for(RegisteredLocation).add(
            RegisteredLocation(location_id=location_id, name=name, registered_at=datetime.now(UTC))
        )

    return _register


@pytest.fixture
def registered(register_user, register_location):
    """User ST1TEST and location 1 are registered."""
    register_user("ST1TEST")
    register_location(1, name="Harbour Cafe")
