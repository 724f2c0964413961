"""Bounded retries with capped exponential backoff."""

import time
from collections.abc import Callable
from datetime import timedelta

from django.conf import settings

import structlog

from core.exceptions import TransportError
from core.schemas.dispatch import TransportResult

logger = structlog.get_logger(__name__)


class RetryPolicy:
    """Retry schedule for the batch transports and the delivery jobs.

    The delay before attempt ``n + 1`` is ``min(base * 2 ** (n - 1), max)``.
    """

    def __init__(
        self,
        max_attempts: int,
        base_delay_seconds: float,
        max_delay_seconds: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.base_delay_seconds = base_delay_seconds
        self.max_delay_seconds = max_delay_seconds
        self._sleep = sleep

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        """Build the policy configured by ``NOTIFICATION_*`` settings."""
        return cls(
            max_attempts=settings.NOTIFICATION_MAX_SEND_ATTEMPTS,
            base_delay_seconds=settings.NOTIFICATION_RETRY_BASE_DELAY_SECONDS,
            max_delay_seconds=settings.NOTIFICATION_RETRY_MAX_DELAY_SECONDS,
        )

    @classmethod
    def for_enqueue(cls) -> "RetryPolicy":
        """Short in-request policy for handing batches to the job queue.

        Uses the job attempt limit with the ``DISPATCH_ENQUEUE_RETRY_*``
        delays; the long backoff belongs to the jobs themselves.
        """
        return cls(
            max_attempts=settings.NOTIFICATION_MAX_SEND_ATTEMPTS,
            base_delay_seconds=settings.DISPATCH_ENQUEUE_RETRY_BASE_DELAY_SECONDS,
            max_delay_seconds=settings.DISPATCH_ENQUEUE_RETRY_MAX_DELAY_SECONDS,
        )

    def delay_for(self, attempt: int) -> timedelta:
        """Backoff to wait after ``attempt`` failed (attempts count from 1)."""
        seconds = self.base_delay_seconds * 2 ** (max(attempt, 1) - 1)
        return timedelta(seconds=min(seconds, self.max_delay_seconds))

    def can_retry(self, attempt: int) -> bool:
        """Whether another attempt is allowed after ``attempt``."""
        return attempt < self.max_attempts

    def run(self, operation: Callable[[], TransportResult]) -> TransportResult:
        """Call ``operation`` until it succeeds or attempts run out.

        An unsuccessful TransportResult and a raised TransportError both
        count as a failed attempt. The last failure is returned as a result,
        never raised.
        """
        result = TransportResult(success=False, message="No attempt made")
        for attempt in range(1, self.max_attempts + 1):
            try:
                result = operation()
            except TransportError as e:
                result = TransportResult(success=False, message=str(e))

            if result.success:
                return result

            if not self.can_retry(attempt):
                break

            delay = self.delay_for(attempt)
            logger.warning(
                "transport_attempt_failed_retrying",
                attempt=attempt,
                max_attempts=self.max_attempts,
                delay_seconds=delay.total_seconds(),
                reason=result.message,
            )
            self._sleep(delay.total_seconds())

        logger.error(
            "transport_attempts_exhausted",
            max_attempts=self.max_attempts,
            reason=result.message,
        )
        return result
