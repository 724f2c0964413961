"""Delivers a notification to resolved recipients on its channel."""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from contextvars import copy_context

from django.conf import settings
from django.db import DatabaseError, connections

import structlog

from core.enums import Channel
from core.exceptions import UnsupportedChannelError
from core.models import Notification
from core.repositories import UserNotificationRepository
from core.schemas.dispatch import DeliveryResult, Recipient, TransportResult
from core.services.retry_policy import RetryPolicy
from core.services.transports import EmailTransport, SmsTransport

logger = structlog.get_logger(__name__)

Handler = Callable[[Notification, list[Recipient]], DeliveryResult]


class ChannelDispatcher:
    """Maps each channel to exactly one delivery handler.

    ``email`` and ``sms`` hand one batch to a transport under the retry
    policy. ``in_app`` and ``push`` write one ``user_notifications`` row per
    recipient; for ``push`` the row itself is the delivery trigger, so the
    push gateway is never called from here.
    """

    def __init__(
        self,
        email_transport: EmailTransport | None = None,
        sms_transport: SmsTransport | None = None,
        user_notifications: UserNotificationRepository | None = None,
        retry_policy: RetryPolicy | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.email_transport = email_transport or EmailTransport()
        self.sms_transport = sms_transport or SmsTransport()
        self.user_notifications = user_notifications or UserNotificationRepository()
        self.retry_policy = retry_policy or RetryPolicy.for_enqueue()
        self.max_workers = max_workers or settings.DISPATCH_MAX_WORKERS
        self.handlers: dict[Channel, Handler] = {
            Channel.EMAIL: self._send_email,
            Channel.SMS: self._send_sms,
        }
        self.handlers.update(
            (channel, self._create_user_records)
            for channel in Channel
            if channel.creates_user_records
        )

    def dispatch(
        self, notification: Notification, recipients: list[Recipient]
    ) -> DeliveryResult:
        """Deliver ``notification`` to ``recipients``.

        Raises:
            UnsupportedChannelError: If the notification's channel has no
                handler. Raised before any delivery side effect.
        """
        try:
            channel = Channel(notification.channel)
        except ValueError as e:
            raise UnsupportedChannelError(notification.channel) from e

        logger.info(
            "dispatch_started",
            notification_id=str(notification.id),
            channel=channel.value,
            recipient_count=len(recipients),
        )
        result = self.handlers[channel](notification, recipients)
        logger.info(
            "dispatch_finished",
            notification_id=str(notification.id),
            channel=channel.value,
            success=result.success,
            attempted_count=result.attempted_count,
            delivered_count=result.delivered_count,
        )
        return result

    def _send_email(
        self, notification: Notification, recipients: list[Recipient]
    ) -> DeliveryResult:
        addresses = [r.email for r in recipients if r.email]
        result = self.retry_policy.run(
            lambda: self.email_transport.send_batch(
                addresses, notification.title, notification.message
            )
        )
        return self._from_transport(result, len(addresses))

    def _send_sms(
        self, notification: Notification, recipients: list[Recipient]
    ) -> DeliveryResult:
        # Recipients without a phone number fall back to their email address
        numbers = [r.phone or r.email for r in recipients if r.phone or r.email]
        text = f"{notification.title}: {notification.message}"
        result = self.retry_policy.run(lambda: self.sms_transport.send_batch(numbers, text))
        return self._from_transport(result, len(numbers))

    @staticmethod
    def _from_transport(result: TransportResult, attempted: int) -> DeliveryResult:
        return DeliveryResult(
            success=result.success,
            message=result.message,
            attempted_count=attempted,
            delivered_count=result.accepted_count if result.success else 0,
        )

    def _create_user_records(
        self, notification: Notification, recipients: list[Recipient]
    ) -> DeliveryResult:
        if self.max_workers <= 1 or len(recipients) <= 1:
            outcomes = [self._create_one(notification, r) for r in recipients]
        else:
            workers = min(self.max_workers, len(recipients))
            with ThreadPoolExecutor(
                max_workers=workers, thread_name_prefix="dispatch"
            ) as pool:
                # Each task runs in its own copy of the caller's context so
                # log lines keep the request id
                futures = [
                    pool.submit(copy_context().run, self._create_in_worker, notification, r)
                    for r in recipients
                ]
                outcomes = [future.result() for future in futures]

        created = sum(outcomes)
        return DeliveryResult(
            success=True,
            message=(
                f"{notification.channel} notification created for "
                f"{created} of {len(recipients)} recipients"
            ),
            attempted_count=len(recipients),
            delivered_count=created,
        )

    def _create_in_worker(self, notification: Notification, recipient: Recipient) -> bool:
        try:
            return self._create_one(notification, recipient)
        finally:
            connections.close_all()

    def _create_one(self, notification: Notification, recipient: Recipient) -> bool:
        try:
            _, created = self.user_notifications.create_for_recipient(
                notification, recipient.id
            )
        except DatabaseError as e:
            logger.error(
                "user_notification_create_failed",
                notification_id=str(notification.id),
                user_id=str(recipient.id),
                error=str(e),
            )
            return False

        if not created:
            logger.info(
                "user_notification_already_exists",
                notification_id=str(notification.id),
                user_id=str(recipient.id),
            )
        return True
