"""Request correlation and payload-size middleware for the shop API.

``RequestIdMiddleware`` gives every request an identifier, taken from the
incoming ``X-Request-Id`` header or generated as a UUIDv4. The id is kept
on the request and in the ``REQUEST_ID_CTX`` context variable, and echoed
back in the ``X-Request-ID`` response header. ``REQUEST_ROUTE_CTX`` holds
"METHOD path"; both variables feed the logging filter and are reset
when the response leaves.

``ApiSizeLimitMiddleware`` rejects ``/api/`` requests whose declared body
is larger than ``API_MAX_BYTES`` with HTTP 413.
"""

import contextvars
import logging
import os
import uuid

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

REQUEST_ID_CTX = contextvars.ContextVar("request_id", default="-")
REQUEST_ROUTE_CTX = contextvars.ContextVar("http_route", default="-")
MAX_API_BYTES = int(os.getenv("API_MAX_BYTES", str(1 * 1024 * 1024)))


class RequestIdMiddleware(MiddlewareMixin):
    """Set and return a per-request identifier.

    Attributes:
        HEADER (str): Incoming header name as found in ``request.META``.
        RESPONSE_HEADER (str): Header added to every response.
    """

    HEADER = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-ID"

    def process_request(self, request):
        rid = request.META.get(self.HEADER) or str(uuid.uuid4())
        request.request_id = rid
        request._log_ctx_tokens = (
            REQUEST_ID_CTX.set(rid),
            REQUEST_ROUTE_CTX.set(f"{request.method} {request.path}"),
        )

    def process_response(self, request, response):
        """Attach the request id header, log the handled request and clear the context.

        gthread workers reuse threads, so the context variables are reset
        once the response is ready.
        """
        rid = getattr(request, "request_id", REQUEST_ID_CTX.get())
        response[self.RESPONSE_HEADER] = rid
        logger.info("request handled", extra={"status_code": response.status_code})
        tokens = getattr(request, "_log_ctx_tokens", None)
        if tokens:
            REQUEST_ID_CTX.reset(tokens[0])
            REQUEST_ROUTE_CTX.reset(tokens[1])
        return response


class ApiSizeLimitMiddleware(MiddlewareMixin):
    def process_request(self, request):
        if request.path.startswith("/api/"):
            clen = request.META.get("CONTENT_LENGTH")
            if clen and clen.isdigit() and int(clen) > MAX_API_BYTES:
                return JsonResponse({"detail": "PAYLOAD_TOO_LARGE"}, status=413)
