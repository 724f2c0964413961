"""Send every scheduled notification whose time has come.

Meant to be run periodically by an external scheduler (cron, a Kubernetes
CronJob); the service itself never sends on its own.
"""

from django.core.management.base import BaseCommand

from core.services.feedback import LoggingFeedback
from core.services.notification_service import notification_service


class Command(BaseCommand):
    help = "Send scheduled notifications whose scheduled_for time has passed"

    def handle(self, *args, **options):
        outcomes = notification_service.send_due_notifications(LoggingFeedback())
        sent = sum(1 for outcome in outcomes if outcome.success)
        failed = len(outcomes) - sent

        self.stdout.write(
            self.style.SUCCESS(f"Processed {len(outcomes)} scheduled notifications")
        )
        self.stdout.write(f"  Sent: {sent}")
        if failed:
            self.stdout.write(self.style.WARNING(f"  Not sent: {failed}"))
