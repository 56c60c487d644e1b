"""
Booking endpoints: claim the open seat, list history, reset.
"""

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import Clock, get_clock, get_ledger
from app.schemas.booking import (
    BookingCreate,
    BookingListResponse,
    BookingResponse,
    ResetResponse,
    to_record,
)
from app.services.booking_service import BookingLedger, BookingOutcome

router = APIRouter(tags=["Bookings"])


@router.post("/book", response_model=BookingResponse, response_model_exclude_none=True)
async def book_seat(
    booking_data: BookingCreate,
    response: Response,
    ledger: BookingLedger = Depends(get_ledger),
    clock: Clock = Depends(get_clock),
):
    """
    Claim the currently open seat.

    Business rejections (already booked, not open, expired) are 200 with
    success=false; missing fields are a 400. Clients re-poll and retry.
    """
    result = ledger.attempt_booking(booking_data.nickname, booking_data.seat_id, clock())

    if result.outcome is BookingOutcome.MISSING_FIELDS:
        response.status_code = status.HTTP_400_BAD_REQUEST

    return BookingResponse(
        success=result.success,
        message=result.message,
        booking=to_record(result.booking) if result.booking else None,
    )


@router.get("/bookings", response_model=BookingListResponse)
async def list_bookings(ledger: BookingLedger = Depends(get_ledger)):
    """Booking history, most recent claim first."""
    return BookingListResponse(bookings=[to_record(b) for b in ledger.list_bookings()])


@router.post("/reset", response_model=ResetResponse)
async def reset_bookings(ledger: BookingLedger = Depends(get_ledger)):
    """Drop every booking. No confirmation step."""
    ledger.reset()
    return ResetResponse(success=True, message="Reset complete")
