"""Batch transports for the email and SMS channels.

A transport accepts a whole batch or nothing: it hands the destinations to
one background job on the django-rq queue, and the job performs the actual
SMTP or gateway calls. Push has no transport here; see ``core.signals``.
"""

import django_rq
import structlog
from redis.exceptions import RedisError

from core.schemas.dispatch import TransportResult

logger = structlog.get_logger(__name__)

QUEUE_NAME = "default"


class _QueuedTransport:
    name: str
    job_path: str

    def _enqueue(self, destinations: list[str], *args: str) -> TransportResult:
        if not destinations:
            return TransportResult(success=True, message="No destinations", accepted_count=0)

        try:
            job = django_rq.get_queue(QUEUE_NAME).enqueue(self.job_path, destinations, *args)
        except RedisError as e:
            logger.error(
                "transport_enqueue_failed",
                transport=self.name,
                destination_count=len(destinations),
                error=str(e),
            )
            return TransportResult(
                success=False, message=f"{self.name} queue unavailable: {e}"
            )

        logger.info(
            "transport_batch_enqueued",
            transport=self.name,
            destination_count=len(destinations),
            job_id=job.id,
        )
        return TransportResult(
            success=True,
            message=f"{self.name} queued for {len(destinations)} recipients",
            accepted_count=len(destinations),
            job_id=job.id,
        )


class EmailTransport(_QueuedTransport):
    """Queues one SMTP batch job per send."""

    name = "email"
    job_path = "core.jobs.email_jobs.send_batch_email_job"

    def send_batch(self, addresses: list[str], subject: str, body: str) -> TransportResult:
        return self._enqueue(addresses, subject, body)


class SmsTransport(_QueuedTransport):
    """Queues one SMS gateway batch job per send."""

    name = "sms"
    job_path = "core.jobs.gateway_jobs.send_batch_sms_job"

    def send_batch(self, numbers: list[str], text: str) -> TransportResult:
        return self._enqueue(numbers, text)
