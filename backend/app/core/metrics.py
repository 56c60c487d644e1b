"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['outcome']  # accepted, missing_fields, already_booked, seat_not_open, window_expired
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Booking arbitration latency',
    buckets=[0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05]
)

# Seat status metrics
seat_status_queries = Counter(
    'seat_status_queries_total',
    'Total seat status queries'
)

# Ledger metrics
bookings_current = Gauge(
    'bookings_current',
    'Number of bookings currently held in the ledger'
)

ledger_resets = Counter(
    'ledger_resets_total',
    'Number of full ledger resets'
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )

# Convenience functions for instrumentation
def record_booking_attempt(outcome: str):
    """Record booking attempt by outcome value."""
    booking_attempts.labels(outcome=outcome).inc()

def record_seat_status_query():
    seat_status_queries.inc()

def record_ledger_size(size: int):
    bookings_current.set(size)

def record_reset():
    ledger_resets.inc()
    bookings_current.set(0)
