"""Django signals for notification delivery triggers."""

from core.signals.push_signals import enqueue_push_delivery

__all__ = ["enqueue_push_delivery"]
