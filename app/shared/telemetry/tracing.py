"""Tracing helpers (OpenTelemetry API) for workflow evaluation spans.

Only the opentelemetry API is used here: without a configured SDK the tracer
is a no-op, so spans cost nothing in tests and scripts.
"""

import asyncio
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

T = TypeVar("T")

# Allowlist of kwarg names recorded as span attributes (case-insensitive).
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "project_id", "task_id", "rule_id", "event_type", "trigger", "status",
    "count", "limit", "dry_run",
})


def _set_safe_span_attrs(span: trace.Span, kwargs: dict[str, Any]) -> None:
    """Set span attributes from kwargs; only allowlisted keys are recorded."""
    for key, value in kwargs.items():
        if not key.startswith("_") and key.lower() in _SAFE_SPAN_ATTR_KEYS:
            span.set_attribute(f"arg.{key}", str(value))


def _finish(span: trace.Span, error: Exception | None) -> None:
    if error is None:
        span.set_status(Status(StatusCode.OK))
        return
    span.set_status(Status(StatusCode.ERROR, str(error)))
    span.record_exception(error)


def traced(operation_name: str | None = None) -> Callable:
    """Decorator that wraps a sync or async function in a span.

    Args:
        operation_name: Span name (defaults to module.funcname).

    Returns:
        Decorated function.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                _set_safe_span_attrs(span, kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _finish(span, e)
                    raise
                _finish(span, None)
                return result

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                _set_safe_span_attrs(span, kwargs)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    _finish(span, e)
                    raise
                _finish(span, None)
                return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


def set_span_error(exception: Exception) -> None:
    """Mark the current span as error and record the exception."""
    span = trace.get_current_span()
    if span and span.is_recording():
        span.set_status(Status(StatusCode.ERROR, str(exception)))
        span.record_exception(exception)
