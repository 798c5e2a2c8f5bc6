"""Health endpoint reporting database reachability.

The payload names the database backend and the round-trip time of the
probe query.
"""

import logging
import time

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def _probe_database() -> dict:
    started = time.monotonic()
    try:
        with connection.cursor() as cur:
            cur.execute("SELECT 1")
    except DatabaseError:
        logger.exception("health check: database unreachable", extra={"vendor": connection.vendor})
        return {"ok": False, "vendor": connection.vendor}
    return {
        "ok": True,
        "vendor": connection.vendor,
        "latencyMs": round((time.monotonic() - started) * 1000, 2),
    }


def health_view(_request):
    db = _probe_database()
    return JsonResponse({"ok": db["ok"], "components": {"db": db}}, status=200 if db["ok"] else 503)
