"""
Pydantic schemas for the seat status board.
"""

from typing import Optional
from pydantic import BaseModel

from app.models.seat import SeatState
from app.schemas.booking import CamelModel


class OpenSeatResponse(CamelModel):
    seat: str
    open_time: int
    close_time: int


class SeatBoardResponse(CamelModel):
    seats: dict[str, SeatState]
    current_open: Optional[OpenSeatResponse] = None
    timestamp: int


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    bookings: int
    open_seat: Optional[str] = None
