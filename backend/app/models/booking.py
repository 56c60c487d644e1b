"""
Booking model representing a claimed seat.

Key design decisions:
- Immutable once created; the ledger never edits a booking in place
- `time` is a display rendering of `timestamp`, computed once at creation
- At most one booking per seat is enforced by the ledger, not by this record
"""

from dataclasses import dataclass, field
from datetime import datetime


def format_timestamp(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class Booking:
    nickname: str
    seat_id: str
    timestamp: int
    time: str = field(default="")

    def __post_init__(self):
        if not self.time:
            object.__setattr__(self, "time", format_timestamp(self.timestamp))

    def __repr__(self) -> str:
        return f"<Booking(seat={self.seat_id}, nickname={self.nickname}, timestamp={self.timestamp})>"
