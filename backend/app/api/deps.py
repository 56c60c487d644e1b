"""
Request-scoped dependencies shared by the route modules.
"""

from fastapi import Request

from app.core.clock import Clock, get_clock
from app.services.booking_service import BookingLedger

__all__ = ["Clock", "get_clock", "get_ledger"]


def get_ledger(request: Request) -> BookingLedger:
    """The process-wide ledger created in the application lifespan."""
    return request.app.state.ledger
