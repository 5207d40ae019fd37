import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

from src.platform.exception.exceptions import (
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
)


RESULT_BY_ERROR: dict[type[Exception], str] = {
    NotFoundError: 'not_found',
    PaymentRequiredError: 'payment_required',
    ForbiddenError: 'forbidden',
}


class BookingMetrics:
    """
    Hotel booking request metrics

    operation: get/create/move
    result: success/not_found/payment_required/forbidden/error
    """

    def __init__(self):
        self.booking_requests = Counter(
            'hotel_booking_requests_total',
            'Total hotel booking requests',
            ['operation', 'result'],
        )

        self.booking_duration = Histogram(
            'hotel_booking_duration_seconds',
            'Hotel booking request processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

    def record_request(self, *, operation: str, result: str) -> None:
        self.booking_requests.labels(operation=operation, result=result).inc()

    @contextmanager
    def track(self, operation: str) -> Iterator[None]:
        """Count the wrapped call by outcome and time it. Exceptions propagate."""
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.record_request(operation=operation, result=result_for_error(e))
            raise
        else:
            self.record_request(operation=operation, result='success')
        finally:
            self.booking_duration.labels(operation=operation).observe(time.perf_counter() - start)


def result_for_error(error: Exception) -> str:
    for error_type, result in RESULT_BY_ERROR.items():
        if isinstance(error, error_type):
            return result
    return 'error'


# Global metrics instance
booking_metrics = BookingMetrics()
