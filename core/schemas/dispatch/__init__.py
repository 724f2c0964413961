"""Result types passed between the dispatch pipeline stages."""

from core.schemas.dispatch.delivery_result import DeliveryResult
from core.schemas.dispatch.recipient import Recipient
from core.schemas.dispatch.send_outcome import SendOutcome
from core.schemas.dispatch.transport_result import TransportResult

__all__ = ["DeliveryResult", "Recipient", "SendOutcome", "TransportResult"]
