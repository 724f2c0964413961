"""Operator-visible feedback for notification operations."""

import structlog

logger = structlog.get_logger(__name__)


class Feedback:
    """Receives user-facing success and error messages.

    Services report outcomes here instead of raising, so the same pipeline
    can serve the HTTP API and management commands.
    """

    def success(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError


class CollectingFeedback(Feedback):
    """Keeps messages so a view can return them with the response."""

    def __init__(self) -> None:
        self.messages: list[dict[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append({"level": "success", "message": message})

    def error(self, message: str) -> None:
        self.messages.append({"level": "error", "message": message})


class LoggingFeedback(Feedback):
    """Writes messages to the structured log."""

    def success(self, message: str) -> None:
        logger.info("operator_feedback", level="success", feedback=message)

    def error(self, message: str) -> None:
        logger.warning("operator_feedback", level="error", feedback=message)
