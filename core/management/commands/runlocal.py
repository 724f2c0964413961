"""Development server for the admin service.

The hosted backend owns the schema, so the server starts without checking
migrations and without needing a database connection; readiness reports
``degraded`` until the database is reachable.
"""

import os

from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver without migration checks, port taken from ``PORT``."""

    help = "Start the development server without migration checks"
    default_port = os.getenv("PORT", "8000")

    def check_migrations(self, *_args, **_kwargs):
        self.stdout.write(
            self.style.WARNING("Skipping migration checks (schema owned by the hosted backend)")
        )
