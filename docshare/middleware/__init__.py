"""HTTP middleware: timeout, request size limit, request ID, correlation ID.

Applied in main app; order matters (last added = outermost).
"""

from docshare.middleware.correlation_id import CorrelationIDMiddleware
from docshare.middleware.request_id import RequestIDMiddleware
from docshare.middleware.request_size_limit import RequestSizeLimitMiddleware
from docshare.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "TimeoutMiddleware",
]
