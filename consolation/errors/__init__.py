"""Error types and error logging helpers."""

from .handling import log_error  # noqa: F401
from .internal import (  # noqa: F401
    GrammarError,
    InternalError,
    MappingError,
    NetworkError,
    ParsingError,
)

__all__ = [
    "InternalError",
    "NetworkError",
    "ParsingError",
    "GrammarError",
    "MappingError",
    "log_error",
]
