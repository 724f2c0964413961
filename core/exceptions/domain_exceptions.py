"""Exceptions raised by the record stores and the dispatch pipeline."""


class RecordNotFoundError(Exception):
    """A record store lookup, update or delete matched no row."""

    def __init__(self, entity: str, record_id: object):
        """Initialize not found error.

        Args:
            entity: Name of the record store (e.g. "notification")
            record_id: Identifier that matched nothing
        """
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity.capitalize()} with ID {record_id} not found")


class ConflictError(Exception):
    """Operation not allowed in the record's current state (409)."""

    def __init__(self, message: str, detail: str | None = None):
        """Initialize conflict error.

        Args:
            message: Error message
            detail: Additional details about the conflict
        """
        self.detail = detail
        super().__init__(message)


class UnsupportedChannelError(Exception):
    """A notification names a delivery channel with no handler."""

    def __init__(self, channel: object):
        """Initialize unsupported channel error.

        Args:
            channel: The raw channel value
        """
        self.channel = channel
        super().__init__(f"Unsupported notification channel: {channel!r}")


class TransportError(Exception):
    """A batch transport could not accept a delivery request."""

    def __init__(self, transport: str, message: str):
        """Initialize transport error.

        Args:
            transport: Transport name ("email", "sms")
            message: Error message
        """
        self.transport = transport
        super().__init__(message)
