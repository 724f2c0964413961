"""Request context shared with log processors.

Backed by ``contextvars`` so the value follows work handed to the dispatch
worker pool through ``contextvars.copy_context()``.
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> None:
    """Store the request ID for the current context.

    Args:
        request_id: The unique request identifier to store.
    """
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Retrieve the request ID of the current context.

    Returns:
        The current request ID, or None if not set.
    """
    return _request_id.get()


def clear_request_id() -> None:
    """Reset the request ID once the request has been processed."""
    _request_id.set(None)
