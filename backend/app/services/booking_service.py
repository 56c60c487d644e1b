"""
Booking ledger and arbitration for the seat race.

CONCURRENCY STRATEGY: Recompute-and-append under a single lock
===============================================================

Problem:
  Many clients see the same open seat and POST /api/book within milliseconds.
  If two handlers both read "seat not booked" before either appends,
  both succeed. Result: Double booking.

Solution:
  There is no separate "lock the seat" step. Each attempt runs
  read -> validate -> append as one critical section over the ledger:

  1. Reject if the seat already appears in the ledger
  2. Recompute the open seat from `now` and the ledger's booked seats
  3. Reject if the requested seat is not that seat, or the window closed
  4. Append the booking

  The ledger lock makes the sequence atomic across threadpool workers;
  on a single event loop it is uncontended and costs one acquire.

  Step 3's expiry check only guards against clock skew between the selector
  and the caller; the selector itself yields no seat once the window closes.

Limitations:
  - The ledger lives in process memory. Restarts lose history, and separate
    instances keep separate ledgers that can disagree on booked seats.
"""

import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.core.logging import get_logger
from app.core.metrics import booking_latency, record_booking_attempt, record_ledger_size, record_reset
from app.models.booking import Booking
from app.models.seat import OpenSeat, SeatState, all_seat_ids
from app.services.seat_selector import compute_open_seat

logger = get_logger(__name__)


class BookingOutcome(str, Enum):
    ACCEPTED = "accepted"
    MISSING_FIELDS = "missing_fields"
    ALREADY_BOOKED = "already_booked"
    SEAT_NOT_OPEN = "seat_not_open"
    WINDOW_EXPIRED = "window_expired"


@dataclass(frozen=True)
class BookingResult:
    outcome: BookingOutcome
    message: str
    booking: Optional[Booking] = None

    @property
    def success(self) -> bool:
        return self.outcome is BookingOutcome.ACCEPTED


@dataclass(frozen=True)
class StatusView:
    seats: dict[str, SeatState]
    current_open: Optional[OpenSeat]
    timestamp: int


class BookingLedger:
    """
    Append-only record of accepted bookings, in claim order.

    Owned by the application (one per process) and handed to request
    handlers by reference. The only mutation besides append is reset().
    """

    def __init__(self):
        self._bookings: list[Booking] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._bookings)

    def _holder_of(self, seat_id: str) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.seat_id == seat_id:
                return booking
        return None

    def _booked_seat_ids(self) -> set[str]:
        return {booking.seat_id for booking in self._bookings}

    def booked_seat_ids(self) -> set[str]:
        with self._lock:
            return self._booked_seat_ids()

    def open_seat(self, now: int) -> Optional[OpenSeat]:
        with self._lock:
            return compute_open_seat(now, self._booked_seat_ids())

    def attempt_booking(self, nickname: Optional[str], seat_id: Optional[str], now: int) -> BookingResult:
        """
        Validate and record a claim. The first failing check wins:
        missing fields, already booked, seat not open, window expired.
        """
        started = time.perf_counter()
        with self._lock:
            result = self._arbitrate(nickname, seat_id, now)
            size = len(self._bookings)
        booking_latency.observe(time.perf_counter() - started)

        record_booking_attempt(result.outcome.value)
        record_ledger_size(size)
        return result

    def _arbitrate(self, nickname: Optional[str], seat_id: Optional[str], now: int) -> BookingResult:
        if not nickname or not seat_id:
            logger.info("booking_rejected", seat_id=seat_id, nickname=nickname, reason="missing_fields")
            return BookingResult(
                BookingOutcome.MISSING_FIELDS,
                "Nickname and seat ID are required.",
            )

        holder = self._holder_of(seat_id)
        if holder:
            logger.info(
                "booking_rejected",
                seat_id=seat_id,
                nickname=nickname,
                reason="already_booked",
                holder=holder.nickname,
            )
            return BookingResult(
                BookingOutcome.ALREADY_BOOKED,
                f"Seat already booked (booked by {holder.nickname}).",
            )

        open_seat = compute_open_seat(now, self._booked_seat_ids())
        if open_seat is None or open_seat.seat != seat_id:
            logger.info("booking_rejected", seat_id=seat_id, nickname=nickname, reason="seat_not_open")
            return BookingResult(
                BookingOutcome.SEAT_NOT_OPEN,
                "Seat is not open or its window has already closed.",
            )

        if now > open_seat.close_time:
            logger.info("booking_rejected", seat_id=seat_id, nickname=nickname, reason="window_expired")
            return BookingResult(
                BookingOutcome.WINDOW_EXPIRED,
                "Booking window has expired.",
            )

        booking = Booking(nickname=nickname, seat_id=seat_id, timestamp=now)
        self._bookings.append(booking)

        logger.info("booking_accepted", seat_id=seat_id, nickname=nickname, timestamp=now)
        return BookingResult(BookingOutcome.ACCEPTED, "Booking successful!", booking)

    def list_bookings(self) -> list[Booking]:
        """All bookings, most recent claim first."""
        with self._lock:
            return list(reversed(self._bookings))

    def reset(self) -> int:
        """Clear every booking. Returns how many were dropped."""
        with self._lock:
            cleared = len(self._bookings)
            self._bookings = []

        record_reset()
        logger.warning("bookings_reset", cleared=cleared)
        return cleared

    def status_view(self, now: int) -> StatusView:
        """
        Every seat starts as occupied, ledger seats become booked, and the
        current open seat (if any, and still unbooked) becomes available.
        """
        with self._lock:
            booked = self._booked_seat_ids()
            open_seat = compute_open_seat(now, booked)

        seats = {seat_id: SeatState.OCCUPIED for seat_id in all_seat_ids()}
        for seat_id in booked:
            seats[seat_id] = SeatState.BOOKED
        if open_seat and open_seat.seat not in booked:
            seats[open_seat.seat] = SeatState.AVAILABLE

        logger.debug("seat_status_queried", open_seat=open_seat.seat if open_seat else None)
        return StatusView(seats=seats, current_open=open_seat, timestamp=now)
