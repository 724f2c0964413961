"""Base client for downstream gateway communication."""

from typing import Any

import requests
import structlog

from core.exceptions import DownstreamServiceError, DownstreamServiceUnavailableError

logger = structlog.get_logger(__name__)


class BaseDownstreamClient:
    """Base class for downstream gateway HTTP clients.

    Gateways authenticate the service with a static API key, sent both as an
    ``apikey`` header and as a bearer token.
    """

    def __init__(self, service_name: str, base_url: str, api_key: str = ""):
        """Initialize base downstream client.

        Args:
            service_name: Name of the downstream service (for logging/errors)
            base_url: Base URL for the service
            api_key: Gateway API key; no auth headers are sent when empty
        """
        self.service_name = service_name
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = 10  # seconds

    def _get_headers(self) -> dict[str, str]:
        """Get common HTTP headers for requests."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _make_request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        **kwargs,
    ) -> requests.Response:
        """Make HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Full URL for the request
            params: Query parameters
            json_data: JSON body data
            **kwargs: Additional arguments to pass to requests

        Returns:
            Response object

        Raises:
            DownstreamServiceError: For client errors (4xx)
            DownstreamServiceUnavailableError: For server errors (5xx)
            requests.Timeout: For timeout errors
            requests.ConnectionError: For connection errors
        """
        headers = self._get_headers()
        if "headers" in kwargs:
            headers.update(kwargs.pop("headers"))
        kwargs.setdefault("timeout", self.timeout)

        logger.info(
            "downstream_request_started",
            service=self.service_name,
            method=method,
            url=url,
        )

        try:
            response = requests.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json_data,
                **kwargs,
            )
        except requests.Timeout:
            logger.error(
                "downstream_request_timed_out",
                service=self.service_name,
                method=method,
                url=url,
                timeout=kwargs["timeout"],
            )
            raise
        except requests.ConnectionError as e:
            logger.error(
                "downstream_connection_failed",
                service=self.service_name,
                method=method,
                url=url,
                error=str(e),
            )
            raise

        logger.info(
            "downstream_response_received",
            service=self.service_name,
            method=method,
            url=url,
            status_code=response.status_code,
        )

        if response.status_code >= 500:
            logger.error(
                "downstream_server_error",
                service=self.service_name,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise DownstreamServiceUnavailableError(
                service_name=self.service_name,
                status_code=response.status_code,
            )

        if response.status_code >= 400:
            logger.error(
                "downstream_client_error",
                service=self.service_name,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise DownstreamServiceError(
                message=(
                    f"{self.service_name} returned "
                    f"{response.status_code}: {response.text}"
                ),
                service_name=self.service_name,
                status_code=response.status_code,
            )

        return response
