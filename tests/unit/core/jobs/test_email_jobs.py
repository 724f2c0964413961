"""Tests for the email batch job."""

import smtplib
from datetime import timedelta
from unittest.mock import patch

from django.test import SimpleTestCase, override_settings

from core.jobs.email_jobs import send_batch_email_job


@override_settings(
    NOTIFICATION_MAX_SEND_ATTEMPTS=3,
    NOTIFICATION_RETRY_BASE_DELAY_SECONDS=30.0,
    NOTIFICATION_RETRY_MAX_DELAY_SECONDS=900.0,
)
@patch("core.jobs.email_jobs.EmailService")
class TestSendBatchEmailJob(SimpleTestCase):
    """Test cases for send_batch_email_job."""

    @patch("core.jobs.email_jobs.django_rq.get_scheduler")
    def test_all_sent(self, mock_get_scheduler, mock_service_cls):
        mock_service_cls.return_value.send_batch.return_value = []

        send_batch_email_job(["a@example.com"], "S", "B")

        mock_service_cls.return_value.send_batch.assert_called_once_with(
            ["a@example.com"], "S", "B"
        )
        mock_get_scheduler.return_value.enqueue_in.assert_not_called()

    @patch("core.jobs.email_jobs.django_rq.get_scheduler")
    def test_failed_addresses_are_rescheduled(self, mock_get_scheduler, mock_service_cls):
        mock_service_cls.return_value.send_batch.return_value = ["b@example.com"]

        send_batch_email_job(["a@example.com", "b@example.com"], "S", "B", attempt=2)

        mock_get_scheduler.return_value.enqueue_in.assert_called_once_with(
            timedelta(seconds=60),
            send_batch_email_job,
            ["b@example.com"],
            "S",
            "B",
            3,
        )

    @patch("core.jobs.email_jobs.django_rq.get_scheduler")
    def test_connection_failure_retries_whole_batch(
        self, mock_get_scheduler, mock_service_cls
    ):
        mock_service_cls.return_value.send_batch.side_effect = smtplib.SMTPConnectError(
            421, "try later"
        )

        send_batch_email_job(["a@example.com", "b@example.com"], "S", "B")

        args = mock_get_scheduler.return_value.enqueue_in.call_args.args
        self.assertEqual(args[0], timedelta(seconds=30))
        self.assertEqual(args[2], ["a@example.com", "b@example.com"])
        self.assertEqual(args[5], 2)

    @patch("core.jobs.email_jobs.django_rq.get_scheduler")
    def test_gives_up_after_last_attempt(self, mock_get_scheduler, mock_service_cls):
        mock_service_cls.return_value.send_batch.side_effect = OSError("unreachable")

        send_batch_email_job(["a@example.com"], "S", "B", attempt=3)

        mock_get_scheduler.return_value.enqueue_in.assert_not_called()
