"""Delete rotated log files past their retention period."""

from django.core.management.base import BaseCommand

from core.logging import cleanup_old_logs


class Command(BaseCommand):
    help = "Remove rotated log files older than the retention period"

    def add_arguments(self, parser):
        parser.add_argument(
            "--retention-days",
            type=int,
            default=10,
            help="Keep rotated files modified within this many days (default: 10)",
        )

    def handle(self, *args, **options):
        deleted = cleanup_old_logs(retention_days=options["retention_days"])
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} old log files"))
