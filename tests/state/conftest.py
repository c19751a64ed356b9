import pytest

from stubs import StubModel, make_lifecycle


@pytest.fixture
def ready_lifecycle():
    """Lifecycle whose fitted network always outputs 1.5."""
    lifecycle = make_lifecycle(StubModel)
    lifecycle.start()
    lifecycle.wait_until_ready(timeout=10)
    yield lifecycle
    lifecycle.shutdown()
