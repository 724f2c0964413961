"""Tests for the structlog processors and log cleanup."""

import os
import time
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase

from core.logging.config import cleanup_old_logs
from core.logging.context import clear_request_id, set_request_id
from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)


class TestProcessors(TestCase):
    """Test cases for the custom processors."""

    def tearDown(self):
        clear_request_id()

    def test_request_context_added_when_set(self):
        self.assertNotIn("request_id", add_request_context(None, "info", {}))

        set_request_id("req-9")
        self.assertEqual(add_request_context(None, "info", {})["request_id"], "req-9")

    def test_service_and_process_info(self):
        event = add_process_info(None, "info", add_service_context(None, "info", {}))

        self.assertIn("service_name", event)
        self.assertIn("environment", event)
        self.assertEqual(event["process_id"], os.getpid())
        self.assertIn("thread_id", event)

    def test_console_renderer(self):
        line = console_renderer(
            None,
            "info",
            {
                "level": "info",
                "timestamp": "2026-01-01T00:00:00Z",
                "request_id": "req-9",
                "logger": "core.services",
                "event": "notification_finalized",
                "status": "sent",
                "thread_id": 1,
            },
        )

        self.assertIn("[INFO", line)
        self.assertIn("req-9", line)
        self.assertIn("notification_finalized", line)
        self.assertIn("status=sent", line)
        self.assertNotIn("thread_id", line)


class TestCleanupOldLogs(TestCase):
    """Test cases for cleanup_old_logs."""

    def test_removes_only_old_rotated_files(self):
        with TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "service.log"
            log_file.write_text("current")
            old = Path(tmp) / "service.log.1"
            recent = Path(tmp) / "service.log.2"
            old.write_text("old")
            recent.write_text("recent")
            twenty_days_ago = time.time() - 20 * 24 * 60 * 60
            os.utime(old, (twenty_days_ago, twenty_days_ago))

            deleted = cleanup_old_logs(str(log_file), retention_days=10)

            self.assertEqual(deleted, 1)
            self.assertFalse(old.exists())
            self.assertTrue(recent.exists())
            self.assertTrue(log_file.exists())
