"""Structured logger for observability."""

import logging
import os
from typing import Any

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("form_creative_api")
_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_request(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for an inbound request.

    Args:
        request_id: Request identifier (UUID string)
        component: Component name (e.g., 'http', 'serverless', 'submit_lead')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_stage(request_id: str, pipeline: str, stage: str, **kwargs: Any) -> None:
    """
    Log a completed pipeline stage.

    Args:
        request_id: Request identifier
        pipeline: Pipeline name ('chat' or 'submit_lead')
        stage: Stage that just completed (e.g., 'validated', 'lead_inserted')
        **kwargs: Additional fields
    """
    log_request(
        request_id=request_id,
        component=pipeline,
        stage=stage,
        **kwargs,
    )


def log_upstream_failure(service: str, operation: str, error: BaseException) -> None:
    """
    Log a failed call to an upstream service with the full provider error.

    The provider error is only ever written to the server log; callers get a
    generic message instead.

    Args:
        service: Upstream service name (e.g., 'gemini', 'supabase', 'resend')
        operation: Operation that failed
        error: Exception raised by the provider SDK
    """
    _logger.error(
        "upstream=%r | operation=%r | error_type=%r | error=%s",
        service,
        operation,
        type(error).__name__,
        error,
    )


# Export logger instance for direct use
logger = _logger
