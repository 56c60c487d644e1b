"""
Ticketing Race Simulator - Main Application Entry Point

Seats open one at a time on a fixed clock and clients race to claim them:
- Every 20 seconds, one unbooked seat opens for 1.5 seconds
- The open seat is derived from the timestamp alone (no stored schedule)
- Concurrent claims are arbitrated against an in-memory booking ledger
- Structured logging with request correlation, Prometheus metrics
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.deps import Clock, get_clock, get_ledger
from app.core.config import get_settings
from app.core.logging import setup_logging, get_logger
from app.core.metrics import metrics_endpoint
from app.api.router import api_router
from app.api.middleware import RequestLoggingMiddleware
from app.models.seat import CYCLE_DURATION_MS, OPEN_DURATION_MS
from app.schemas.seat import HealthResponse
from app.services.booking_service import BookingLedger

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()

    app.state.ledger = BookingLedger()

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        cycle_ms=CYCLE_DURATION_MS,
        open_window_ms=OPEN_DURATION_MS,
    )

    yield

    logger.info("application_shutdown", bookings=len(app.state.ledger))


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Clock-driven seat race: one seat opens briefly each cycle, first valid claim wins",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS: wide open for the simulation demo, not for production use
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware
app.add_middleware(RequestLoggingMiddleware)

# Routes
app.include_router(api_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods are both "not found"
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("request_rejected_invalid_body", errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request body."},
    )


@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check(
    ledger: BookingLedger = Depends(get_ledger),
    clock: Clock = Depends(get_clock),
):
    """Health check endpoint for Docker and load balancers."""
    open_seat = ledger.open_seat(clock())
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        bookings=len(ledger),
        open_seat=open_seat.seat if open_seat else None,
    )


@app.get("/metrics", tags=["Health"], include_in_schema=False)
async def metrics():
    if not settings.METRICS_ENABLED:
        raise StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


@app.options("/{full_path:path}", include_in_schema=False)
async def preflight(full_path: str):
    """Bare OPTIONS on any path; real CORS preflights are answered by CORSMiddleware."""
    return Response(status_code=status.HTTP_200_OK)


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
