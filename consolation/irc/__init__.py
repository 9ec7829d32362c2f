"""IRC client package.

Line parsing, message mapping, the blocking connection handle and its
builder.
"""

from .builder import IrcBuilder  # noqa: F401
from .connection import ConnectionState, Irc, split_address  # noqa: F401
from .models import (  # noqa: F401
    Message,
    PrivateMessage,
    message_from_raw,
    register_message,
    registered_commands,
    unregister_message,
)
from .parser import RawMessage, parse_raw_message  # noqa: F401

__all__ = [
    "ConnectionState",
    "Irc",
    "IrcBuilder",
    "Message",
    "PrivateMessage",
    "RawMessage",
    "message_from_raw",
    "parse_raw_message",
    "register_message",
    "registered_commands",
    "split_address",
    "unregister_message",
]
