"""
Seat model: the fixed 10x10 grid and the per-cycle open window.

Key design decisions:
- Seats have no storage of their own; the roster is derived from the grid constants
- Roster order is row-major (A1..A10, B1..B10, ..., J10) and must never change,
  because the open-seat pick indexes into it
- The cycle timing lives here rather than in Settings so that every instance
  computes the same schedule from the same timestamp
"""

from dataclasses import dataclass
from enum import Enum

ROW_LABELS = ("A", "B", "C", "D", "E", "F", "G", "H", "I", "J")
COLUMN_COUNT = 10

CYCLE_DURATION_MS = 20_000  # one seat cycle
OPEN_DURATION_MS = 1_500  # open window at the start of each cycle


class SeatState(str, Enum):
    OCCUPIED = "occupied"
    BOOKED = "booked"
    AVAILABLE = "available"


@dataclass(frozen=True)
class OpenSeat:
    """The seat that can be claimed during the current open window."""

    seat: str
    open_time: int
    close_time: int


def all_seat_ids() -> list[str]:
    """Full roster in row-major order."""
    return [f"{row}{col}" for row in ROW_LABELS for col in range(1, COLUMN_COUNT + 1)]
