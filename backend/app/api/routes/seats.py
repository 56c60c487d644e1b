"""
Seat status endpoint polled by racing clients.
"""

from fastapi import APIRouter, Depends

from app.api.deps import Clock, get_clock, get_ledger
from app.core.metrics import record_seat_status_query
from app.schemas.seat import OpenSeatResponse, SeatBoardResponse
from app.services.booking_service import BookingLedger

router = APIRouter(tags=["Seats"])


@router.get("/seats", response_model=SeatBoardResponse)
async def get_seat_board(
    ledger: BookingLedger = Depends(get_ledger),
    clock: Clock = Depends(get_clock),
):
    """
    Full 100-seat map plus the seat open right now.
    Recomputed on every call; no schedule state is stored.
    """
    view = ledger.status_view(clock())
    record_seat_status_query()

    current_open = None
    if view.current_open:
        current_open = OpenSeatResponse(
            seat=view.current_open.seat,
            open_time=view.current_open.open_time,
            close_time=view.current_open.close_time,
        )
    return SeatBoardResponse(seats=view.seats, current_open=current_open, timestamp=view.timestamp)
