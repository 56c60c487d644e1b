from app.schemas.booking import (
    BookingCreate, BookingRecord, BookingResponse, BookingListResponse, ResetResponse, to_record,
)
from app.schemas.seat import OpenSeatResponse, SeatBoardResponse, HealthResponse

__all__ = [
    "BookingCreate", "BookingRecord", "BookingResponse", "BookingListResponse", "ResetResponse", "to_record",
    "OpenSeatResponse", "SeatBoardResponse", "HealthResponse",
]
