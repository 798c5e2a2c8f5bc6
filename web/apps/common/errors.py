"""Error taxonomy and persistence error classification.

Services raise ``NotFound`` directly when a lookup comes back empty.
Repositories raise ``PersistenceError`` carrying a short code (a leading
letter followed by four digits, e.g. ``P2025``). Views wrap service calls
in ``persistence_boundary()`` which turns a ``PersistenceError`` into one
of the HTTP-facing kinds below using ``classify_persistence_error``.

``NotFound``, ``BadRequest`` and ``InternalError`` are DRF exceptions, so
DRF renders them as ``{"detail": ...}`` with the matching status code.
"""

import logging
from contextlib import contextmanager

from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions, status

logger = logging.getLogger(__name__)

RECORD_NOT_FOUND_CODE = "P2025"

INTERNAL_ERROR_MESSAGE = _("An unexpected error occurred.")
DATABASE_ERROR_MESSAGE = _("An unexpected database error occurred.")


class NotFound(exceptions.NotFound):
    """The requested entity does not exist."""


class BadRequest(exceptions.APIException):
    """Malformed input or a constraint violation reported by the database."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _("Bad request.")
    default_code = "bad_request"


class InternalError(exceptions.APIException):
    """Infrastructure failure or an unclassified persistence error.

    The detail is always a fixed generic text; the underlying message is
    only logged.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = INTERNAL_ERROR_MESSAGE
    default_code = "internal_error"


class PersistenceError(Exception):
    """Error raised by repositories when the database rejects an operation.

    Attributes:
        code: Short persistence error code such as ``P2025`` or ``P1001``.
        message: Human readable description of the failure.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"PersistenceError(code={self.code!r}, message={self.message!r})"


def classify_persistence_error(error: PersistenceError) -> exceptions.APIException:
    """Map a persistence error into ``NotFound``, ``BadRequest`` or ``InternalError``.

    The decision is made on the exact record-not-found code first and then
    on the second character of the code:

    - ``P2025`` -> ``NotFound`` with the original message.
    - ``?1xxx`` -> ``InternalError`` (connection class), generic message.
    - ``?2xxx`` -> ``BadRequest`` with the original message.
    - anything else -> ``InternalError``, generic database message.

    Args:
        error: The caught persistence error. It must expose ``code``;
            objects without it raise ``AttributeError``.

    Returns:
        The exception to raise at the boundary.
    """
    if error.code == RECORD_NOT_FOUND_CODE:
        logger.info("record not found", extra={"code": error.code, "detail": str(error)})
        return NotFound(str(error))

    category = error.code[1:2]
    if category == "1":
        logger.error("database unavailable", extra={"code": error.code, "detail": str(error)})
        return InternalError(INTERNAL_ERROR_MESSAGE)
    if category == "2":
        logger.info("query rejected by database", extra={"code": error.code, "detail": str(error)})
        return BadRequest(str(error))

    logger.error("unhandled persistence error code: %s", error.code, exc_info=error)
    return InternalError(DATABASE_ERROR_MESSAGE)


@contextmanager
def persistence_boundary():
    """Re-raise any ``PersistenceError`` from the block as its HTTP category."""
    try:
        yield
    except PersistenceError as exc:
        raise classify_persistence_error(exc) from exc
