"""Custom exceptions for downstream gateway communication."""


class DownstreamServiceError(Exception):
    """Base exception for downstream gateway errors."""

    def __init__(
        self,
        message: str,
        service_name: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize downstream service error.

        Args:
            message: Error message
            service_name: Name of the downstream gateway
            status_code: HTTP status code if applicable
        """
        self.service_name = service_name
        self.status_code = status_code
        super().__init__(message)


class DownstreamServiceUnavailableError(DownstreamServiceError):
    """Downstream gateway is unavailable (5xx responses)."""

    def __init__(self, service_name: str, status_code: int, message: str | None = None):
        """Initialize service unavailable error.

        Args:
            service_name: Name of the downstream gateway
            status_code: HTTP status code (500, 503, etc.)
            message: Optional custom error message
        """
        super().__init__(
            message=message
            or f"{service_name} is unavailable (status: {status_code})",
            service_name=service_name,
            status_code=status_code,
        )
