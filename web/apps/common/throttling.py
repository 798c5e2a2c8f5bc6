"""Per-method throttle scopes shared by the API views."""

from rest_framework.throttling import ScopedRateThrottle

SAFE_METHODS = ("GET", "HEAD", "OPTIONS")


class MethodScopedThrottleMixin:
    """Select the ``ScopedRateThrottle`` scope from the request method.

    Reads use ``read_scope`` and writes use ``write_scope``. A scope left as
    ``None`` disables throttling for that kind of request.
    """

    throttle_classes = [ScopedRateThrottle]
    read_scope = None
    write_scope = None

    def get_throttles(self):
        # DRF evaluates throttles in initial(), before the handler
        self.throttle_scope = self.read_scope if self.request.method in SAFE_METHODS else self.write_scope
        return [throttle() for throttle in self.throttle_classes]
