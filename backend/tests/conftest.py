"""
Pytest fixtures for the ledger, a controllable clock, and the HTTP client.

Each test gets its own ledger and clock; the app's dependencies are
overridden so no lifespan state or wall-clock time leaks between tests.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.api.deps import get_clock, get_ledger
from app.services.booking_service import BookingLedger

# 1_700_000_000_000 % 20_000 == 0, so this is the first instant of a cycle
CYCLE_START = 1_700_000_000_000


class FixedClock:
    """Callable clock returning whatever `now` is set to."""

    def __init__(self, now: int):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def ledger() -> BookingLedger:
    return BookingLedger()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(CYCLE_START)


@pytest_asyncio.fixture(scope="function")
async def client(ledger: BookingLedger, clock: FixedClock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the test ledger and clock."""
    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_clock] = lambda: clock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
