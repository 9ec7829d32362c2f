"""Typed chat events and the command -> event registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from ..errors.internal import MappingError
from .parser import RawMessage


class Message:
    """Base class of every event returned by :meth:`Irc.receive`."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class PrivateMessage(Message):
    """A chat line sent by a user or bot in a joined channel.

    Attributes:
        username: Sender nickname (prefix text before the first ``!``).
        body: Message text.
        channel: Target channel as sent on the wire, e.g. ``#chan``.
        tags: Message tags in wire order.
    """

    username: str
    body: str
    channel: str = ""
    tags: tuple[tuple[str, str], ...] = field(default=())


MessageFactory = Callable[[RawMessage], Message]
F = TypeVar("F", bound=MessageFactory)

_MESSAGE_FACTORIES: dict[str, MessageFactory] = {}


def register_message(command: str) -> Callable[[F], F]:
    """Register a factory turning ``command`` lines into a :class:`Message`.

    New event types are added by decorating a factory; the parser does not
    need to change::

        @register_message("CLEARCHAT")
        def _clearchat(raw: RawMessage) -> ClearChat:
            ...
    """

    def decorator(factory: F) -> F:
        _MESSAGE_FACTORIES[command.upper()] = factory
        return factory

    return decorator


def unregister_message(command: str) -> None:
    _MESSAGE_FACTORIES.pop(command.upper(), None)


def registered_commands() -> frozenset[str]:
    return frozenset(_MESSAGE_FACTORIES)


def message_from_raw(raw: RawMessage) -> Message | None:
    """Map a raw record to its typed event.

    Returns:
        The event, or ``None`` when no factory handles ``raw.command``.

    Raises:
        MappingError: if a handled command lacks a required field.
    """
    factory = _MESSAGE_FACTORIES.get(raw.command.upper())
    if factory is None:
        return None
    return factory(raw)


@register_message("PRIVMSG")
def _private_message(raw: RawMessage) -> PrivateMessage:
    if raw.prefix is None:
        raise MappingError("PRIVMSG missing prefix", data={"command": raw.command})
    if len(raw.params) < 2:
        raise MappingError(
            "PRIVMSG missing message body",
            data={"command": raw.command, "params": list(raw.params)},
        )
    username = raw.prefix.split("!", 1)[0]
    return PrivateMessage(
        username=username,
        body=raw.params[1],
        channel=raw.params[0],
        tags=tuple(raw.tags),
    )


__all__ = [
    "Message",
    "PrivateMessage",
    "MessageFactory",
    "register_message",
    "unregister_message",
    "registered_commands",
    "message_from_raw",
]
