"""Tests for notification and moderation enums."""

from unittest import TestCase

from core.enums import Channel, NotificationLifecycle


class TestChannel(TestCase):
    """Test cases for Channel."""

    def test_record_creating_channels(self):
        """Only in_app and push persist per-recipient records."""
        self.assertTrue(Channel.IN_APP.creates_user_records)
        self.assertTrue(Channel.PUSH.creates_user_records)
        self.assertFalse(Channel.EMAIL.creates_user_records)
        self.assertFalse(Channel.SMS.creates_user_records)

    def test_values_match_storage_strings(self):
        self.assertEqual(Channel("in_app"), Channel.IN_APP)
        with self.assertRaises(ValueError):
            Channel("fax")


class TestNotificationLifecycle(TestCase):
    """Test cases for lifecycle transitions."""

    def test_draft_can_be_scheduled_or_sent(self):
        draft = NotificationLifecycle.DRAFT
        self.assertTrue(draft.can_transition_to(NotificationLifecycle.SCHEDULED))
        self.assertTrue(draft.can_transition_to(NotificationLifecycle.SENDING))
        self.assertFalse(draft.can_transition_to(NotificationLifecycle.SENT))

    def test_scheduled_can_be_cancelled_rescheduled_or_sent(self):
        scheduled = NotificationLifecycle.SCHEDULED
        self.assertTrue(scheduled.can_transition_to(NotificationLifecycle.DRAFT))
        self.assertTrue(scheduled.can_transition_to(NotificationLifecycle.SCHEDULED))
        self.assertTrue(scheduled.can_transition_to(NotificationLifecycle.SENDING))

    def test_sending_ends_sent_or_failed(self):
        sending = NotificationLifecycle.SENDING
        self.assertTrue(sending.can_transition_to(NotificationLifecycle.SENT))
        self.assertTrue(sending.can_transition_to(NotificationLifecycle.FAILED))
        self.assertFalse(sending.can_transition_to(NotificationLifecycle.SENDING))

    def test_terminal_statuses_have_no_transitions(self):
        for status in (NotificationLifecycle.SENT, NotificationLifecycle.FAILED):
            for target in NotificationLifecycle:
                self.assertFalse(status.can_transition_to(target))
