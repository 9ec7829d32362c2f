"""consolation: a small blocking client for IRC-style chat servers."""

from .errors import (  # noqa: F401
    GrammarError,
    InternalError,
    MappingError,
    NetworkError,
    ParsingError,
)
from .irc import (  # noqa: F401
    Irc,
    IrcBuilder,
    Message,
    PrivateMessage,
    RawMessage,
    parse_raw_message,
)

__version__ = "0.1.0"

__all__ = [
    "GrammarError",
    "InternalError",
    "Irc",
    "IrcBuilder",
    "MappingError",
    "Message",
    "NetworkError",
    "ParsingError",
    "PrivateMessage",
    "RawMessage",
    "parse_raw_message",
]
