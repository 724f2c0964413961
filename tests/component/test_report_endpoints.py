"""Component tests for the report and moderation endpoints."""

from uuid import UUID, uuid4

from core.models import Pet
from tests.component.base import API_ROOT, AdminApiTestCase
from tests.factories import make_help_request, make_pet, make_profile, make_report

URL = f"{API_ROOT}/reports"


class TestReportEndpoints(AdminApiTestCase):
    """Reports listing, review and moderation."""

    def test_list_filters_and_enriches(self):
        reporter = make_profile(full_name="Ana Ruiz")
        post = make_help_request(title="Found cat")
        make_report(report_type="aviso", reported_id=post.id, reporter_id=reporter.id)
        make_report(report_type="user", status="dismissed")

        response = self.client.get(URL, {"status": "pending"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 1)
        report = body["results"][0]
        self.assertEqual(report["reporter"]["full_name"], "Ana Ruiz")
        self.assertEqual(report["reported_content"]["title"], "Found cat")

    def test_detail_missing(self):
        response = self.client.get(f"{URL}/{uuid4()}")

        self.assertEqual(response.status_code, 404)

    def test_update_status_records_caller_as_reviewer(self):
        report = make_report()

        response = self.patch_json(
            f"{URL}/{report.id}/status", {"status": "resolved", "notes": "Handled"}
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "resolved")
        self.assertEqual(UUID(body["reviewed_by"]), self.admin_id)
        self.assertIsNotNone(body["reviewed_at"])

    def test_update_status_rejects_unknown_status(self):
        report = make_report()

        response = self.patch_json(f"{URL}/{report.id}/status", {"status": "archived"})

        self.assertEqual(response.status_code, 400)

    def test_moderate_pet(self):
        pet = make_pet()
        report = make_report(report_type="petomatch", reported_id=pet.id)

        response = self.post_json(f"{URL}/{report.id}/moderate", {"action": "delete"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["action"], "delete")
        self.assertFalse(Pet.objects.filter(pk=pet.id).exists())

    def test_moderate_missing_content(self):
        report = make_report(report_type="user")

        response = self.post_json(f"{URL}/{report.id}/moderate", {"action": "disable"})

        self.assertEqual(response.status_code, 404)

    def test_stats(self):
        make_report(reason="spam")
        make_report(reason="scam", status="resolved")

        response = self.client.get(f"{URL}/stats")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total"], 2)
        self.assertEqual(response.json()["by_reason"], {"spam": 1, "scam": 1})

    def test_requires_admin_scope(self):
        self.scopes = []

        self.assertEqual(self.client.get(URL).status_code, 403)
