"""Tests for profile audience queries."""

from django.test import TestCase

from core.enums import Channel
from core.repositories import ProfileRepository
from tests.factories import make_membership, make_profile


class TestProfileRepository(TestCase):
    """Test cases for ProfileRepository."""

    def setUp(self):
        self.store = ProfileRepository()

    def test_push_and_in_app_require_device_token(self):
        with_token = make_profile()
        make_profile(fcm_token=None)
        make_profile(fcm_token="")

        for channel in (Channel.PUSH, Channel.IN_APP):
            self.assertEqual(list(self.store.reachable_by(channel)), [with_token])

    def test_email_requires_address(self):
        with_email = make_profile(fcm_token=None)
        make_profile(email="")

        self.assertEqual(list(self.store.reachable_by(Channel.EMAIL)), [with_email])

    def test_sms_accepts_phone_or_email(self):
        phone_only = make_profile(email="", phone="+34600000001")
        email_only = make_profile(phone=None)
        make_profile(email="", phone="")

        self.assertEqual(
            set(self.store.reachable_by(Channel.SMS)), {phone_only, email_only}
        )

    def test_premium_needs_an_active_membership_and_is_distinct(self):
        premium = make_profile()
        make_membership(premium)
        make_membership(premium)
        lapsed = make_profile()
        make_membership(lapsed, is_active=False)
        make_profile()

        self.assertEqual(
            list(self.store.premium_reachable_by(Channel.IN_APP)), [premium]
        )

    def test_reachable_matching_by_email_or_id(self):
        by_email = make_profile()
        by_id = make_profile()
        make_profile()

        matches = self.store.reachable_matching(
            Channel.IN_APP, [by_email.email], [by_id.id]
        )

        self.assertEqual(set(matches), {by_email, by_id})

    def test_contact_summary(self):
        profile = make_profile(full_name="Ana Ruiz", email="ana@example.com")

        self.assertEqual(
            self.store.contact_summary(profile.id),
            {"full_name": "Ana Ruiz", "email": "ana@example.com"},
        )
        self.assertIsNone(self.store.contact_summary(None))
