"""Hands newly created push records to the push delivery job."""

from django.db.models.signals import post_save
from django.dispatch import receiver

import django_rq
import structlog
from redis.exceptions import RedisError

from core.enums import Channel

logger = structlog.get_logger(__name__)

PUSH_JOB = "core.jobs.gateway_jobs.send_push_job"


@receiver(post_save, sender="core.UserNotification")
def enqueue_push_delivery(sender: type, instance, created: bool, **_kwargs) -> None:
    """Queue device delivery when a ``push`` record is first created.

    Only creation triggers delivery, so re-dispatching a notification (which
    finds the existing record) never pushes twice.
    """
    if not created or instance.channel != Channel.PUSH.value:
        return

    try:
        django_rq.get_queue("default").enqueue(PUSH_JOB, str(instance.id))
    except RedisError as e:
        # The record stays pending; losing the push must not undo the insert
        logger.error(
            "push_enqueue_failed",
            user_notification_id=str(instance.id),
            user_id=str(instance.user_id),
            error=str(e),
        )
        return

    logger.info(
        "push_delivery_enqueued",
        user_notification_id=str(instance.id),
        user_id=str(instance.user_id),
    )
