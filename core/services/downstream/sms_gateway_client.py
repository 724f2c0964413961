"""Client for the SMS gateway."""

from django.conf import settings

import structlog

from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)


class SmsGatewayClient(BaseDownstreamClient):
    """Sends text messages through the HTTP SMS gateway."""

    def __init__(self):
        super().__init__(
            service_name="sms-gateway",
            base_url=settings.SMS_GATEWAY_URL,
            api_key=settings.SMS_GATEWAY_API_KEY,
        )
        self.sender_id = settings.SMS_SENDER_ID

    def send_sms(self, number: str, text: str) -> str | None:
        """Send one message.

        Returns:
            The gateway's message id, when it reports one.

        Raises:
            DownstreamServiceError: If the gateway rejects the message
            DownstreamServiceUnavailableError: If the gateway is unavailable
            requests.RequestException: On timeout or connection failure
        """
        response = self._make_request(
            "POST",
            f"{self.base_url}/messages",
            json_data={"to": number, "from": self.sender_id, "text": text},
        )
        message_id = response.json().get("id") if response.content else None
        logger.info("sms_sent", to=number, message_id=message_id)
        return message_id
