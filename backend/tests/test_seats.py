"""
Tests for the seat status board.
"""

import pytest
from httpx import AsyncClient

from app.models.seat import CYCLE_DURATION_MS, OPEN_DURATION_MS
CYCLE_START = 1_700_000_000_000


@pytest.mark.asyncio
async def test_board_during_open_window(client: AsyncClient):
    response = await client.get("/api/seats")
    assert response.status_code == 200
    data = response.json()

    assert data["timestamp"] == CYCLE_START
    assert len(data["seats"]) == 100
    current = data["currentOpen"]
    assert current["openTime"] == CYCLE_START
    assert current["closeTime"] == CYCLE_START + OPEN_DURATION_MS
    assert data["seats"][current["seat"]] == "available"
    assert list(data["seats"].values()).count("occupied") == 99


@pytest.mark.asyncio
async def test_board_outside_open_window(client: AsyncClient, clock):
    clock.now = CYCLE_START + OPEN_DURATION_MS
    data = (await client.get("/api/seats")).json()
    assert data["currentOpen"] is None
    assert set(data["seats"].values()) == {"occupied"}


@pytest.mark.asyncio
async def test_board_is_stable_within_window(client: AsyncClient, clock):
    first = (await client.get("/api/seats")).json()["currentOpen"]
    clock.now = CYCLE_START + 1499
    second = (await client.get("/api/seats")).json()["currentOpen"]
    assert first == second


@pytest.mark.asyncio
async def test_board_after_all_seats_booked(client: AsyncClient, clock):
    for cycle in range(100):
        clock.now = CYCLE_START + cycle * CYCLE_DURATION_MS
        seat = (await client.get("/api/seats")).json()["currentOpen"]["seat"]
        await client.post("/api/book", json={"nickname": f"user{cycle}", "seatId": seat})

    clock.now = CYCLE_START + 100 * CYCLE_DURATION_MS
    data = (await client.get("/api/seats")).json()
    assert data["currentOpen"] is None
    assert set(data["seats"].values()) == {"booked"}
