"""
Structured Logging Utilities

Request-scoped logging context and a decorator that records the start,
completion and failure of service operations.
"""

import inspect
import logging
import uuid
from contextvars import ContextVar
from functools import wraps
from typing import Any, Dict, Optional


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Argument names copied into the log context when an operation is called
_CONTEXT_ARGUMENTS = ("farm_id",)


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Farm created", extra={"farm_id": farm.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Merge the request context with call-specific extras."""
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request.

    Example:
        set_logging_context(request_id="abc-123", method="GET")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def new_request_id() -> str:
    """Generate a short request identifier."""
    return uuid.uuid4().hex[:12]


def _extract_context(func, args, kwargs) -> Dict[str, Any]:
    """Pick identifying arguments (e.g. farm_id) out of a call."""
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        return {}
    return {
        key: bound.arguments[key]
        for key in _CONTEXT_ARGUMENTS
        if key in bound.arguments
    }


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("update_farm")
        def update(self, farm_id: int, dto: FarmRequest):
            ...
    """
    def decorator(func):
        logger = StructuredLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            context = {"operation": operation_name}
            context.update(_extract_context(func, args, kwargs))

            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}: {e}", extra=context)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
