"""Tests for report queries."""

from django.test import TestCase

from core.repositories import ReportRepository
from tests.factories import make_report


class TestReportRepository(TestCase):
    """Test cases for ReportRepository."""

    def setUp(self):
        self.store = ReportRepository()

    def test_filter_by_status_and_type(self):
        pending_user = make_report(report_type="user")
        make_report(report_type="aviso")
        make_report(report_type="user", status="resolved")

        self.assertEqual(
            list(self.store.filter(status="pending", report_type="user")), [pending_user]
        )
        self.assertEqual(self.store.filter().count(), 3)

    def test_count_by(self):
        make_report(reason="spam")
        make_report(reason="spam")
        make_report(reason="scam")

        self.assertEqual(self.store.count_by("reason"), {"spam": 2, "scam": 1})
