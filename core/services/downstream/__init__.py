"""Downstream gateway clients package."""

from core.services.downstream.push_gateway_client import PushGatewayClient
from core.services.downstream.sms_gateway_client import SmsGatewayClient

__all__ = ["PushGatewayClient", "SmsGatewayClient"]
