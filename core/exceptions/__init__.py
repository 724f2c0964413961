"""Exception types for the admin service.

The DRF exception handler lives in ``core.exceptions.handlers`` and is
referenced from settings by dotted path.
"""

from core.exceptions.domain_exceptions import (
    ConflictError,
    RecordNotFoundError,
    TransportError,
    UnsupportedChannelError,
)
from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
)

__all__ = [
    "ConflictError",
    "DownstreamServiceError",
    "DownstreamServiceUnavailableError",
    "RecordNotFoundError",
    "TransportError",
    "UnsupportedChannelError",
]
