"""Production server startup script for the admin service.

Starts the Django application with Gunicorn for container deployments.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the admin service using Gunicorn.

    Worker and thread counts are read from GUNICORN_WORKERS and
    GUNICORN_THREADS. Notification sends run the dispatch pipeline inside the
    request, so the timeout is kept generous.
    """
    sys.argv = [
        "gunicorn",
        "petadmin.wsgi:application",
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("GUNICORN_WORKERS", "2"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "4"),
        "--timeout",
        "120",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
