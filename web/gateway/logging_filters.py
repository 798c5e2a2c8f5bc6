"""Logging filter that adds the current request context to log records.

Values come from the context variables set by ``RequestIdMiddleware``.
Records logged outside a request get ``"-"`` for both fields, so the JSON
formatter can always reference ``%(request_id)s`` and ``%(http_route)s``.
"""

from logging import Filter, LogRecord

from .middleware import REQUEST_ID_CTX, REQUEST_ROUTE_CTX


class RequestIdFilter(Filter):
    """Stamp ``request_id`` and ``http_route`` on each record.

    Values passed explicitly through ``extra=`` win over the context.
    """

    def filter(self, record: LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = REQUEST_ID_CTX.get()
        if not hasattr(record, "http_route"):
            record.http_route = REQUEST_ROUTE_CTX.get()
        return True
