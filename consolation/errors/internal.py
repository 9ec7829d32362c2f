"""Centralized internal error hierarchy.

Classes:
  InternalError        – Base for all internal errors.
  NetworkError         – Transport failures while connecting, reading or writing.
  ParsingError         – Inbound data that could not be interpreted.
  GrammarError         – A wire line without a command name.
  MappingError         – A known command missing a field its message needs.

Nothing in the client retries on these; they surface to the caller of the
operation in progress.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    Wraps the underlying ``OSError`` (available as ``__cause__``), e.g. an
    unreachable address or a connection reset by the peer.
    """


class ParsingError(InternalError):
    """Exception raised when inbound data has an unexpected format."""


class GrammarError(ParsingError):
    """A line whose command name could not be extracted."""


class MappingError(ParsingError):
    """A recognized command lacking a field required by its message type."""


__all__ = [
    "InternalError",
    "NetworkError",
    "ParsingError",
    "GrammarError",
    "MappingError",
]
