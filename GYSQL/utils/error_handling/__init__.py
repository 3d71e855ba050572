"""Standardized error handling utilities.

Provides consistent error handling patterns across the codebase.
"""

from .handlers import (
    handle_pipeline_error,
    PipelineError,
    UnknownTableError,
    ErrorContext,
    log_error_with_context,
    create_error_response,
)

__all__ = [
    "handle_pipeline_error",
    "PipelineError",
    "UnknownTableError",
    "ErrorContext",
    "log_error_with_context",
    "create_error_response",
]
