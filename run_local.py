#!/usr/bin/env python
"""Script to run the admin service locally."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the Django development server.

    Uses the 'runlocal' command, which skips migration checks because the
    hosted backend owns the schema.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "petadmin.settings")
    execute_from_command_line([sys.argv[0], "runlocal"])


if __name__ == "__main__":
    main()
