"""Shared utilities: datetime, generators and sanitization."""

from app.shared.utils.datetime import ensure_utc, parse_datetime, utc_now
from app.shared.utils.generators import generate_cuid
from app.shared.utils.sanitization import strip_html

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_datetime",
    "strip_html",
]
