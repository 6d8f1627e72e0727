"""HTTP middleware. Applied in sponsorship.main (last added = outermost)."""

from sponsorship.middleware.request_log import RequestLogMiddleware

__all__ = ["RequestLogMiddleware"]
