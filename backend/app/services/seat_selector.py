"""
Clock-driven seat selector.

SCHEDULING MODEL: Stateless time-to-seat mapping
================================================

Every CYCLE_DURATION_MS the cycle restarts; during its first OPEN_DURATION_MS
exactly one unbooked seat is open for claims.

  cycle_pos    = timestamp % CYCLE_DURATION_MS
  window_start = timestamp - cycle_pos
  index        = floor(|sin(window_start / 1000)| * 10000) % len(available)

The pick depends only on (window_start, booked seats). Nothing about the
"current seat" is stored, so every request in the same window, on any
instance holding the same ledger, derives the same seat.

The sine hash is a deterministic scramble, not a random source. Replacing it
with a real RNG would break agreement between requests.
"""

import math
from typing import Iterable, Optional

from app.models.seat import (
    CYCLE_DURATION_MS,
    OPEN_DURATION_MS,
    OpenSeat,
    all_seat_ids,
)


def window_start_for(timestamp: int) -> int:
    return timestamp - timestamp % CYCLE_DURATION_MS


def is_window_open(timestamp: int) -> bool:
    return timestamp % CYCLE_DURATION_MS < OPEN_DURATION_MS


def seat_index(window_start: int, available_count: int) -> int:
    return math.floor(abs(math.sin(window_start / 1000)) * 10000) % available_count


def compute_open_seat(timestamp: int, booked_seat_ids: Iterable[str]) -> Optional[OpenSeat]:
    """
    Return the seat open at `timestamp`, or None.

    None means either the cycle is outside its open window or every seat
    is already booked.
    """
    if not is_window_open(timestamp):
        return None

    window_start = window_start_for(timestamp)

    booked = set(booked_seat_ids)
    available = [seat_id for seat_id in all_seat_ids() if seat_id not in booked]
    if not available:
        return None

    return OpenSeat(
        seat=available[seat_index(window_start, len(available))],
        open_time=window_start,
        close_time=window_start + OPEN_DURATION_MS,
    )
