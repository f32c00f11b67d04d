"""Logging helpers: debug-only logging and errors with context."""

import logging
import traceback
from os import getenv
from typing import Any, Optional

DEBUG = getenv("APP_DEBUG", "false").lower() == "true"

logger = logging.getLogger("PodSurvey")


def debug_log(message: str, *args, **kwargs) -> None:
    """
    Log a message only when APP_DEBUG is enabled.

    Args:
        message: Log message (supports % formatting)
        *args: Positional arguments for message formatting
        **kwargs: ``level`` overrides DEBUG; the rest goes to the logger
    """
    if DEBUG:
        level = kwargs.pop("level", logging.DEBUG)
        logger.log(level, message, *args, **kwargs)


def format_context(context: Optional[dict]) -> str:
    if not context:
        return ""
    return ", ".join(f"{key}={value}" for key, value in context.items())


def error_log(
    message: str,
    exc: Optional[BaseException] = None,
    context: Optional[dict] = None,
    **kwargs,
) -> str:
    """
    Log an error with optional context and exception details.

    Args:
        message: Error message
        exc: Exception that caused the error, if any
        context: Extra key/value pairs (operation, ids, request path...)
        **kwargs: Passed through to the logger

    Returns:
        The composed message, so callers can reuse it for display.
    """
    parts = [message]

    rendered = format_context(context)
    if rendered:
        parts.append(f"Context: {rendered}")

    if exc is not None:
        parts.append(f"Exception: {type(exc).__name__}: {exc}")
        if DEBUG:
            parts.append(
                "Traceback:\n" + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            )

    full_message = " | ".join(parts)
    if exc is not None:
        logger.error(full_message, exc_info=exc, **kwargs)
    else:
        logger.error(full_message, **kwargs)
    return full_message


def log_exception_with_context(
    exc: BaseException,
    context: Optional[dict] = None,
    message: Optional[str] = None,
) -> None:
    """Log an exception, defaulting the message to its type name."""
    error_log(message or f"Unhandled exception: {type(exc).__name__}", exc=exc, context=context)


def log_request_error(request: Any, exc: BaseException, message: Optional[str] = None) -> None:
    """Log an exception together with the method, path and user agent of a request."""
    context = {}
    url = getattr(request, "url", None)
    if url is not None:
        context["path"] = getattr(url, "path", str(url))
    method = getattr(request, "method", None)
    if method:
        context["method"] = method
    headers = getattr(request, "headers", None)
    if headers is not None:
        context["user_agent"] = headers.get("user-agent", "unknown")

    log_exception_with_context(exc, context=context, message=message)
