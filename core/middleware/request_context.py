"""Per-request context: request id, security context and timing."""

import time
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

import structlog

from core.auth.context import clear_current_principal
from core.constants import PROCESS_TIME_HEADER, REQUEST_ID_HEADER, SLOW_REQUEST_THRESHOLD
from core.logging.context import clear_request_id, set_request_id

logger = structlog.get_logger(__name__)


class RequestContextMiddleware:
    """Set up and tear down the context every request runs in.

    - Reuses the caller's X-Request-ID or generates one, exposes it to
      logging and echoes it on the response
    - Adds X-Process-Time and logs requests slower than the threshold
    - Clears the request id and the authenticated principal afterwards
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]
        start_time = time.perf_counter()

        try:
            response = self.get_response(request)

            duration = time.perf_counter() - start_time
            response[REQUEST_ID_HEADER] = request_id
            response[PROCESS_TIME_HEADER] = f"{duration:.6f}"

            if duration > SLOW_REQUEST_THRESHOLD:
                logger.warning(
                    "slow_request",
                    method=request.method,
                    path=request.path,
                    duration_seconds=round(duration, 3),
                    threshold_seconds=SLOW_REQUEST_THRESHOLD,
                )
            return response
        finally:
            clear_current_principal()
            clear_request_id()
