"""Shared telemetry: logging setup and tracing helpers."""

from app.shared.telemetry.logging import RequestIdFilter, get_logger, setup_logging
from app.shared.telemetry.tracing import (
    add_span_attributes,
    set_span_error,
    traced,
)

__all__ = [
    "RequestIdFilter",
    "setup_logging",
    "get_logger",
    "traced",
    "add_span_attributes",
    "set_span_error",
]
