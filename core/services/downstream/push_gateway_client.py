"""Client for the push notification gateway."""

from typing import Any
from uuid import UUID

from django.conf import settings

import structlog

from core.exceptions import DownstreamServiceError
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)


class PushGatewayClient(BaseDownstreamClient):
    """Delivers device pushes through the backend's notification function.

    The gateway looks up the user's device token itself and answers with a
    ``push`` object carrying ``success``, ``skipped`` or ``error``.
    """

    def __init__(self):
        super().__init__(
            service_name="push-gateway",
            base_url=settings.PUSH_GATEWAY_URL,
            api_key=settings.PUSH_GATEWAY_API_KEY,
        )

    def send_push(
        self,
        user_id: UUID,
        title: str,
        message: str,
        notification_type: str,
        metadata: dict[str, Any] | None = None,
    ) -> bool:
        """Push one notification to a user's device.

        Returns:
            True if delivered, False if the gateway skipped the user.

        Raises:
            DownstreamServiceError: If the gateway rejects the request or
                reports a push error
            DownstreamServiceUnavailableError: If the gateway is unavailable
            requests.RequestException: On timeout or connection failure
        """
        response = self._make_request(
            "POST",
            self.base_url,
            json_data={
                "user_id": str(user_id),
                "title": title,
                "message": message,
                "type": notification_type,
                "metadata": metadata or {},
            },
        )

        push = (response.json() or {}).get("push") or {}
        if push.get("success"):
            logger.info("push_sent", user_id=str(user_id))
            return True
        if push.get("skipped"):
            logger.info("push_skipped_by_gateway", user_id=str(user_id))
            return False

        raise DownstreamServiceError(
            message=f"Push delivery failed: {push.get('error', 'unknown error')}",
            service_name=self.service_name,
            status_code=response.status_code,
        )
