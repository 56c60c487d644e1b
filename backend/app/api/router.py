"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from app.api.routes import seats, bookings

api_router = APIRouter(prefix="/api")
api_router.include_router(seats.router)
api_router.include_router(bookings.router)
