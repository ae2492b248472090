import pytest

from seqemit import EventEmitter


@pytest.fixture
def emitter():
    return EventEmitter(trace=True)


@pytest.fixture
def calls():
    """Shared order-recording list for listeners."""
    return []
