"""Prometheus metrics for Interview Practice API."""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response
import time
from functools import wraps
from logger import logger

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency',
    ['method', 'endpoint']
)

registration_count = Counter(
    'registrations_total',
    'Total accounts registered'
)

login_count = Counter(
    'logins_total',
    'Total login attempts',
    ['result']
)

interviews_saved_count = Counter(
    'interviews_saved_total',
    'Total interview sessions saved'
)

seed_duration = Histogram(
    'seed_duration_seconds',
    'Seed loader run time'
)

error_count = Counter(
    'errors_total',
    'Total errors',
    ['error_type', 'endpoint']
)


def track_time(metric_histogram):
    """Decorator to track execution time."""
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                return result
            finally:
                duration = time.time() - start_time
                metric_histogram.observe(duration)
                logger.debug(f"{func.__name__} took {duration:.3f}s", extra={
                    'function': func.__name__,
                    'duration': duration
                })
        return wrapper
    return decorator


async def get_metrics():
    """Generate Prometheus metrics."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
