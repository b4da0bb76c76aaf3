import pytest

from tests.fakes import FakeDelay


@pytest.fixture
def events():
    """Shared log of collaborator calls, used to check interleaving."""
    return []


@pytest.fixture
def no_delay(events):
    return FakeDelay(events)
