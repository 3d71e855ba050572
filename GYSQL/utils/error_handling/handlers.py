"""Standardized error handling for the GYSQL pipeline.

Parsing and synthesis never raise for "empty" conditions (no tables, nothing
selected, malformed DDL). The errors here cover caller mistakes, such as
asking for tables that were never parsed, and unexpected failures that the
service layer must report.
"""

from typing import Dict, Any, Iterable, Optional, Tuple
from dataclasses import dataclass, field
from datetime import datetime
import traceback

from GYSQL.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """Context information for error handling."""
    stage: str
    table_name: Optional[str] = None
    column_name: Optional[str] = None
    additional_context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PipelineError(Exception):
    """Standardized error for pipeline failures."""
    message: str
    context: ErrorContext
    original_exception: Optional[Exception] = None
    error_type: str = "pipeline_error"

    def __str__(self) -> str:
        return f"[{self.context.stage}] {self.message}"


class UnknownTableError(PipelineError):
    """Raised when a caller selects tables that are not in the registry."""

    def __init__(self, table_names: Iterable[str], known_tables: Iterable[str] = ()):
        self.table_names: Tuple[str, ...] = tuple(table_names)
        super().__init__(
            message=f"Unknown table(s): {', '.join(self.table_names)}",
            context=ErrorContext(
                stage="selection",
                additional_context={"known_tables": list(known_tables)},
            ),
            error_type="unknown_table",
        )


def log_error_with_context(
    error: Exception,
    context: ErrorContext,
    level: str = "error"
) -> None:
    """
    Log error with full context information.

    Args:
        error: The exception that occurred
        context: Error context information
        level: Log level ("error", "warning", "critical")
    """
    log_msg_parts = [f"Error in {context.stage}"]

    if context.table_name:
        log_msg_parts.append(f"Table: {context.table_name}")
    if context.column_name:
        log_msg_parts.append(f"Column: {context.column_name}")

    log_msg = " | ".join(log_msg_parts)

    if level == "critical":
        logger.critical(f"{log_msg}: {error}", exc_info=True)
    elif level == "warning":
        logger.warning(f"{log_msg}: {error}", exc_info=True)
    else:
        logger.error(f"{log_msg}: {error}", exc_info=True)

    if context.additional_context:
        logger.debug(f"Additional context: {context.additional_context}")


def create_error_response(
    error: Exception,
    context: ErrorContext,
) -> Dict[str, Any]:
    """
    Create standardized error response dictionary.

    Args:
        error: The exception that occurred
        context: Error context information

    Returns:
        Dictionary with error information
    """
    error_type = getattr(error, "error_type", None) or type(error).__name__
    message = error.message if isinstance(error, PipelineError) else str(error)

    error_response = {
        "success": False,
        "error": {
            "type": error_type,
            "message": message,
            "stage": context.stage,
            "timestamp": datetime.now().isoformat(),
        }
    }

    if context.table_name:
        error_response["error"]["table_name"] = context.table_name
    if context.column_name:
        error_response["error"]["column_name"] = context.column_name

    if error.__traceback__ is not None:
        tb_str = "".join(traceback.format_tb(error.__traceback__))
        # Keep the tail only
        error_response["error"]["traceback"] = tb_str[-500:] if len(tb_str) > 500 else tb_str

    if context.additional_context:
        error_response["error"]["additional_context"] = context.additional_context

    return error_response


def handle_pipeline_error(
    error: Exception,
    context: Optional[ErrorContext] = None,
    log_level: str = "error",
    reraise: bool = False
) -> Dict[str, Any]:
    """
    Handle a pipeline error with standardized logging and response creation.

    Args:
        error: The exception that occurred
        context: Error context; taken from the error itself for PipelineError
        log_level: Log level ("error", "warning", "critical")
        reraise: If True, re-raise the exception after handling

    Returns:
        Error response dictionary

    Raises:
        PipelineError: If reraise=True, wraps non-pipeline errors in PipelineError
    """
    if context is None:
        context = error.context if isinstance(error, PipelineError) else ErrorContext(stage="unknown")

    log_error_with_context(error, context, level=log_level)
    error_response = create_error_response(error, context)

    if reraise:
        if isinstance(error, PipelineError):
            raise error
        raise PipelineError(
            message=str(error),
            context=context,
            original_exception=error,
            error_type=type(error).__name__
        ) from error

    return error_response
