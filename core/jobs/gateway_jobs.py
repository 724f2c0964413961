"""Background jobs for the SMS and push gateways."""

from uuid import UUID

import django_rq
import requests
import structlog

from core.enums import DeliveryStatus
from core.exceptions import DownstreamServiceError, DownstreamServiceUnavailableError
from core.models import UserNotification
from core.repositories import UserNotificationRepository
from core.services.downstream import PushGatewayClient, SmsGatewayClient
from core.services.retry_policy import RetryPolicy

logger = structlog.get_logger(__name__)

TOO_MANY_REQUESTS = 429


def is_retryable(error: Exception) -> bool:
    """Whether a gateway failure may succeed on a later attempt."""
    if isinstance(error, (requests.RequestException, DownstreamServiceUnavailableError)):
        return True
    return (
        isinstance(error, DownstreamServiceError)
        and error.status_code == TOO_MANY_REQUESTS
    )


def send_batch_sms_job(numbers: list[str], text: str, attempt: int = 1) -> None:
    """Send ``text`` to every number in the batch.

    Numbers that fail with a retryable error are re-enqueued together;
    rejected numbers are dropped.
    """
    client = SmsGatewayClient()
    retry: list[str] = []
    for number in numbers:
        try:
            client.send_sms(number, text)
        except (DownstreamServiceError, requests.RequestException) as e:
            retryable = is_retryable(e)
            logger.error(
                "sms_send_failed",
                to=number,
                attempt=attempt,
                retryable=retryable,
                error=str(e),
            )
            if retryable:
                retry.append(number)

    if not retry:
        logger.info("sms_batch_completed", attempt=attempt, number_count=len(numbers))
        return

    policy = RetryPolicy.from_settings()
    if not policy.can_retry(attempt):
        logger.error("sms_batch_failed_permanently", attempt=attempt, failed_count=len(retry))
        return

    delay = policy.delay_for(attempt)
    django_rq.get_scheduler("default").enqueue_in(
        delay, send_batch_sms_job, retry, text, attempt + 1
    )
    logger.warning(
        "sms_batch_retry_scheduled",
        attempt=attempt,
        failed_count=len(retry),
        delay_seconds=delay.total_seconds(),
    )


def send_push_job(user_notification_id: str, attempt: int = 1) -> None:
    """Push one per-recipient record to the user's device.

    Enqueued when a ``push`` record is created. Users without a device
    token or with notifications turned off are skipped.
    """
    records = UserNotificationRepository()
    record = (
        UserNotification.objects.select_related("user")
        .filter(pk=UUID(str(user_notification_id)))
        .first()
    )
    if record is None:
        logger.error("push_record_not_found", user_notification_id=str(user_notification_id))
        return

    if record.delivery_status in (DeliveryStatus.SENT.value, DeliveryStatus.SKIPPED.value):
        logger.info(
            "push_already_processed",
            user_notification_id=str(record.id),
            delivery_status=record.delivery_status,
        )
        return

    user = record.user
    if not user.fcm_token or not user.notifications_enabled:
        records.set_delivery_status(record.id, DeliveryStatus.SKIPPED)
        logger.info(
            "push_skipped",
            user_notification_id=str(record.id),
            user_id=str(user.id),
            has_token=bool(user.fcm_token),
            notifications_enabled=user.notifications_enabled,
        )
        return

    try:
        delivered = PushGatewayClient().send_push(
            user_id=user.id,
            title=record.title,
            message=record.message,
            notification_type=record.notification_type,
            metadata=record.metadata,
        )
    except (DownstreamServiceError, requests.RequestException) as e:
        _handle_push_failure(records, record.id, attempt, e)
        return

    status = DeliveryStatus.SENT if delivered else DeliveryStatus.SKIPPED
    records.set_delivery_status(record.id, status)
    logger.info(
        "push_processed",
        user_notification_id=str(record.id),
        delivery_status=status.value,
        attempt=attempt,
    )


def _handle_push_failure(
    records: UserNotificationRepository,
    record_id: UUID,
    attempt: int,
    error: Exception,
) -> None:
    policy = RetryPolicy.from_settings()
    if is_retryable(error) and policy.can_retry(attempt):
        delay = policy.delay_for(attempt)
        django_rq.get_scheduler("default").enqueue_in(
            delay, send_push_job, str(record_id), attempt + 1
        )
        logger.warning(
            "push_retry_scheduled",
            user_notification_id=str(record_id),
            attempt=attempt,
            delay_seconds=delay.total_seconds(),
            error=str(error),
        )
        return

    records.set_delivery_status(record_id, DeliveryStatus.FAILED)
    logger.error(
        "push_failed_permanently",
        user_notification_id=str(record_id),
        attempt=attempt,
        error=str(error),
    )
