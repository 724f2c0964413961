"""Background job for sending email notifications.

One job carries a whole batch. Addresses that fail are re-enqueued through
the rq scheduler with the retry policy's backoff until the attempt limit is
reached.
"""

import smtplib

import django_rq
import structlog

from core.services.email_service import EmailService
from core.services.retry_policy import RetryPolicy

logger = structlog.get_logger(__name__)


def send_batch_email_job(
    addresses: list[str], subject: str, body: str, attempt: int = 1
) -> None:
    """Send one email to every address in the batch.

    This job is executed by RQ workers.

    Args:
        addresses: Recipient email addresses.
        subject: Email subject line (the notification title).
        body: Plain text body (the notification message).
        attempt: 1 for the first run, incremented on each retry.
    """
    try:
        failed = EmailService().send_batch(addresses, subject, body)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(
            "email_batch_connection_failed",
            attempt=attempt,
            address_count=len(addresses),
            error=str(e),
        )
        failed = list(addresses)

    if not failed:
        logger.info("email_batch_completed", attempt=attempt, address_count=len(addresses))
        return

    policy = RetryPolicy.from_settings()
    if not policy.can_retry(attempt):
        logger.error(
            "email_batch_failed_permanently",
            attempt=attempt,
            failed_count=len(failed),
        )
        return

    delay = policy.delay_for(attempt)
    django_rq.get_scheduler("default").enqueue_in(
        delay, send_batch_email_job, failed, subject, body, attempt + 1
    )
    logger.warning(
        "email_batch_retry_scheduled",
        attempt=attempt,
        failed_count=len(failed),
        delay_seconds=delay.total_seconds(),
    )
