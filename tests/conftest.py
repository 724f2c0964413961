"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from unittest.mock import patch

from django.core.cache import cache
from django.test import Client

import pytest


@pytest.fixture(autouse=True)
def rq_queues():
    """Replace django-rq queues and the scheduler; no Redis in tests.

    Tests that assert on enqueued jobs use ``rq_queues.queue`` and
    ``rq_queues.scheduler``.
    """
    with (
        patch("django_rq.get_queue") as get_queue,
        patch("django_rq.get_scheduler") as get_scheduler,
    ):
        get_queue.return_value.enqueue.return_value.id = "job-1"
        yield SimpleNamespace(
            queue=get_queue.return_value,
            scheduler=get_scheduler.return_value,
        )


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear the locmem cache so cached token and health results do not leak."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()
