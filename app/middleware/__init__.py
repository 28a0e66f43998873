"""HTTP middleware: request timeout and request ID.

Applied in main app; order matters (last added = outermost).
Import and use from app.main.
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
