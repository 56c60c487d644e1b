"""
Pydantic schemas for booking-related request/response validation.
Wire format uses camelCase keys (seatId) to match the browser client.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.booking import Booking


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BookingCreate(CamelModel):
    # Optional so that missing fields reach the arbitrator and come back as a 400 rejection
    nickname: Optional[str] = None
    seat_id: Optional[str] = None


class BookingRecord(CamelModel):
    nickname: str
    seat_id: str
    timestamp: int
    time: str


class BookingResponse(CamelModel):
    success: bool
    message: str
    booking: Optional[BookingRecord] = None


class BookingListResponse(CamelModel):
    bookings: list[BookingRecord] = Field(default_factory=list)


class ResetResponse(CamelModel):
    success: bool = True
    message: str


def to_record(booking: Booking) -> BookingRecord:
    return BookingRecord(
        nickname=booking.nickname,
        seat_id=booking.seat_id,
        timestamp=booking.timestamp,
        time=booking.time,
    )
