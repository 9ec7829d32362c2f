from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    GrammarError,
    InternalError,
    MappingError,
    NetworkError,
    ParsingError,
)


def log_error(
    message: str, error: Exception, context: dict[str, object] | None = None
) -> None:
    """Logs an error message with the associated exception details.

    The error is categorized from its type so log lines for transport and
    data-format problems can be told apart at a glance.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    error_type = "unknown"
    if isinstance(error, NetworkError | OSError):
        error_type = "network"
    elif isinstance(error, GrammarError):
        error_type = "grammar"
    elif isinstance(error, MappingError):
        error_type = "mapping"
    elif isinstance(error, ParsingError):
        error_type = "parsing"
    elif isinstance(error, InternalError):
        error_type = "internal"

    merged: dict[str, object] = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=error_type,
        message=f"{message}: {error}",
        exception=error,
        context=merged or None,
    )
