"""Tests for the push delivery trigger."""

from django.test import TestCase

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from core.models import UserNotification
from core.repositories import UserNotificationRepository
from core.signals.push_signals import PUSH_JOB
from tests.factories import make_notification, make_profile


class TestEnqueuePushDelivery(TestCase):
    """Test cases for enqueue_push_delivery."""

    @pytest.fixture(autouse=True)
    def _queues(self, rq_queues):
        self.queue = rq_queues.queue

    def setUp(self):
        self.user = make_profile()
        self.store = UserNotificationRepository()

    def test_new_push_record_is_enqueued_once(self):
        notification = make_notification(channel="push")

        record, _ = self.store.create_for_recipient(notification, self.user.id)
        self.store.create_for_recipient(notification, self.user.id)

        self.queue.enqueue.assert_called_once_with(PUSH_JOB, str(record.id))

    def test_in_app_record_is_not_pushed(self):
        notification = make_notification(channel="in_app")

        self.store.create_for_recipient(notification, self.user.id)

        self.queue.enqueue.assert_not_called()

    def test_updating_a_record_does_not_push(self):
        notification = make_notification(channel="push")
        record, _ = self.store.create_for_recipient(notification, self.user.id)
        self.queue.enqueue.reset_mock()

        record.is_read = True
        record.save()

        self.queue.enqueue.assert_not_called()

    def test_queue_failure_keeps_the_record(self):
        self.queue.enqueue.side_effect = RedisConnectionError("refused")
        notification = make_notification(channel="push")

        record, created = self.store.create_for_recipient(notification, self.user.id)

        self.assertTrue(created)
        self.assertTrue(UserNotification.objects.filter(pk=record.id).exists())
