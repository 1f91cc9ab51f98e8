import pytest

from huewheel import HueWheel

from .utils import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def events():
    return []


@pytest.fixture
def wheel(clock, events):
    """A default 250px wheel recording its delivered change events."""
    return HueWheel(on_change=events.append, clock=clock)
