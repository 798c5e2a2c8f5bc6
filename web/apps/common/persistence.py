"""Translation of Django database exceptions into ``PersistenceError``.

Repositories run their ORM calls inside ``translate_db_errors()`` so the
rest of the application only ever sees ``PersistenceError`` codes:

    P2025  record to read/update/delete does not exist
    P2002  unique constraint failed
    P2003  foreign key constraint failed (including protected deletes)
    P2011  null constraint violation
    P2004  any other constraint failure
    P2000  value out of range / too long for the column
    P1001  database server unreachable
    P1017  server closed the connection
    P0000  unclassified database error
"""

from contextlib import contextmanager

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.core.validators import DecimalValidator
from django.db import (
    DatabaseError,
    DataError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from django.db.models import ProtectedError

from .errors import PersistenceError


def _integrity_code(exc: IntegrityError) -> str:
    text = str(exc).lower()
    if "unique" in text or "duplicate" in text:
        return "P2002"
    if "foreign key" in text:
        return "P2003"
    if "not null" in text or "null value" in text:
        return "P2011"
    return "P2004"


def code_for(exc: Exception) -> str:
    """Return the persistence error code for a Django/database exception."""
    if isinstance(exc, ObjectDoesNotExist):
        return "P2025"
    if isinstance(exc, ProtectedError):
        return "P2003"
    if isinstance(exc, IntegrityError):
        return _integrity_code(exc)
    if isinstance(exc, DataError):
        return "P2000"
    if isinstance(exc, InterfaceError):
        return "P1017"
    if isinstance(exc, OperationalError):
        return "P1001"
    return "P0000"


@contextmanager
def translate_db_errors(not_found_message: str = "Record not found."):
    """Convert database exceptions raised in the block into ``PersistenceError``.

    Args:
        not_found_message: Message used when the block raises
            ``ObjectDoesNotExist``.

    Raises:
        PersistenceError: For any database exception raised inside the block.
    """
    try:
        yield
    except ObjectDoesNotExist as exc:
        raise PersistenceError(code_for(exc), not_found_message) from exc
    except (ProtectedError, DatabaseError) as exc:
        raise PersistenceError(code_for(exc), str(exc)) from exc


def ensure_fits_column(model, field_name: str, value) -> None:
    """Raise ``P2000`` when ``value`` does not fit the decimal column.

    SQLite accepts out-of-range decimals on write and fails reading them
    back, so callers check before writing.

    Raises:
        PersistenceError: ``P2000`` naming the column.
    """
    field = model._meta.get_field(field_name)
    try:
        DecimalValidator(field.max_digits, field.decimal_places)(value)
    except ValidationError as exc:
        raise PersistenceError(
            "P2000",
            f"The provided value for the column is too long for the column's type. Column: {field.column}",
        ) from exc
