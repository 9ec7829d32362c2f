"""Blocking connection handle for an IRC session."""

from __future__ import annotations

import logging
import socket
from collections.abc import Iterator
from enum import Enum, auto

from .. import constants
from ..config.model import ConnectionConfig
from ..errors.internal import NetworkError, ParsingError
from ..logs.logger import logger
from .models import Message, message_from_raw
from .parser import RawMessage, parse_raw_message

Address = str | tuple[str, int]


class ConnectionState(Enum):
    OPEN = auto()
    CLOSED = auto()


def split_address(address: Address) -> tuple[str, int]:
    """Turn ``"host:port"`` (or a ``(host, port)`` pair) into a socket address.

    A bare host uses ``IRC_DEFAULT_PORT``. URI schemes are rejected.
    """
    if isinstance(address, tuple):
        host, port = address
        return host, int(port)
    if "://" in address:
        raise ValueError(f"address must not include a URI scheme: {address!r}")
    if address.startswith("["):  # [v6]:port
        host, _, rest = address[1:].partition("]")
        port = rest.lstrip(":")
    elif address.count(":") == 1:
        host, _, port = address.partition(":")
    else:
        host, port = address, ""
    if not host:
        raise ValueError(f"address has no host: {address!r}")
    try:
        return host, int(port) if port else constants.IRC_DEFAULT_PORT
    except ValueError as e:
        raise ValueError(f"invalid port in address {address!r}") from e


def _check_argument(value: str, what: str) -> str:
    if "\r" in value or "\n" in value:
        raise ValueError(f"{what} must not contain line breaks")
    return value


class Irc:
    """Handle to an open IRC session.

    Use :class:`consolation.irc.IrcBuilder` (or :meth:`Irc.connect`) to
    create one. The handle is driven by a single caller; reads and writes
    share one socket and never overlap.
    """

    def __init__(self, sock: socket.socket, *, keepalive: bool = False) -> None:
        self._sock = sock
        self._reader = sock.makefile("rb")
        self.keepalive = keepalive
        self.state = ConnectionState.OPEN

    @classmethod
    def connect(cls, config: ConnectionConfig, address: Address) -> Irc:
        """Open a connection to ``address`` and run the handshake in ``config``.

        Raises:
            NetworkError: if the server cannot be reached or a write fails.
        """
        host, port = split_address(address)
        logger.log_event("irc", "connecting", address=f"{host}:{port}")
        try:
            sock = socket.create_connection(
                (host, port), timeout=constants.IRC_CONNECT_TIMEOUT
            )
            # Receive has no timeout; it blocks until a line or EOF arrives.
            sock.settimeout(None)
        except OSError as e:
            logger.log_event(
                "irc",
                "connect_failed",
                level=logging.ERROR,
                address=f"{host}:{port}",
                error=str(e),
            )
            raise NetworkError(
                f"Could not connect to {host}:{port}: {e}",
                data={"address": f"{host}:{port}"},
            ) from e

        try:
            irc = cls(sock, keepalive=config.keepalive)
        except OSError as e:
            sock.close()
            raise NetworkError(f"Could not set up reader: {e}") from e

        try:
            if config.capabilities:
                irc._request_capabilities(config.capabilities)
            if config.password is not None or config.nickname is not None:
                irc._authenticate(config.password, config.nickname)
        except BaseException as e:
            logger.log_event(
                "irc", "handshake_failed", level=logging.ERROR, error=str(e)
            )
            irc.close()
            raise

        logger.log_event("irc", "connected", address=f"{host}:{port}")
        return irc

    @property
    def closed(self) -> bool:
        return self.state is ConnectionState.CLOSED

    def _write_line(self, line: str, *, log_line: str | None = None) -> None:
        if self.closed:
            raise NetworkError("connection is closed", data={"line": log_line or line})
        data = f"{line}{constants.IRC_LINE_TERMINATOR}".encode(constants.IRC_ENCODING)
        try:
            self._sock.sendall(data)
        except OSError as e:
            raise NetworkError(f"Failed to send line: {e}") from e
        logger.log_event("irc", "send", level=logging.DEBUG, line=log_line or line)

    def _request_capabilities(self, capabilities: list[str]) -> None:
        joined = " ".join(capabilities)
        logger.log_event(
            "irc", "cap_request", level=logging.DEBUG, capabilities=joined
        )
        self._write_line(f"CAP REQ :{joined}")

    def _authenticate(self, password: str | None, nickname: str | None) -> None:
        logger.log_event(
            "irc",
            "authenticate",
            level=logging.DEBUG,
            has_password=password is not None,
            nickname=nickname,
        )
        if password is not None:
            self._write_line(
                f"PASS {_check_argument(password, 'password')}", log_line="PASS ***"
            )
        if nickname is not None:
            self._write_line(f"NICK {_check_argument(nickname, 'nickname')}")

    def send_raw(self, line: str) -> None:
        """Send one protocol line; the terminator is appended here."""
        self._write_line(_check_argument(line, "line"))

    def join(self, channel_name: str) -> None:
        """Join a channel. Do not include the leading ``#``.

        No confirmation is awaited.
        """
        _check_argument(channel_name, "channel name")
        logger.log_event("irc", "join", channel_name=channel_name)
        self._write_line(f"JOIN #{channel_name}")

    def _read_line(self) -> str | None:
        try:
            data = self._reader.readline()
        except OSError as e:
            raise NetworkError(f"Failed to read from connection: {e}") from e
        if not data:
            return None
        return data.decode(constants.IRC_ENCODING, errors="replace")

    def _handle_ping(self, raw: RawMessage) -> None:
        if raw.params:
            self._write_line(f"PONG :{raw.params[-1]}")
        else:
            self._write_line("PONG")
        logger.log_event("irc", "pong", level=logging.DEBUG)

    def receive(self) -> Message | None:
        """Block until the next mappable message arrives.

        Lines for commands without a registered message type are skipped.

        Returns:
            The next message, or ``None`` if and only if the connection is
            closed. Calling again after that keeps returning ``None``.

        Raises:
            NetworkError: on a read (or keepalive write) failure.
            GrammarError: if a line has no command name.
            MappingError: if a known command lacks a required field.
        """
        while not self.closed:
            line = self._read_line()
            if line is None:
                logger.log_event("irc", "connection_closed")
                self.close()
                return None
            logger.log_event("irc", "raw", level=logging.DEBUG, line=line.rstrip())

            try:
                raw = parse_raw_message(line)
                message = message_from_raw(raw)
            except ParsingError as e:
                logger.log_event(
                    "irc", "parse_error", level=logging.WARNING, error=str(e)
                )
                raise

            if message is not None:
                return message
            if self.keepalive and raw.command.upper() == "PING":
                self._handle_ping(raw)
            else:
                logger.log_event(
                    "irc", "unhandled_command", level=logging.DEBUG, command=raw.command
                )
        return None

    def __iter__(self) -> Iterator[Message]:
        while (message := self.receive()) is not None:
            yield message

    def close(self) -> None:
        """Release the socket and its reader. Safe to call more than once."""
        if self.closed:
            return
        self.state = ConnectionState.CLOSED
        try:
            self._reader.close()
        finally:
            self._sock.close()
        logger.log_event("irc", "closed", level=logging.DEBUG)

    def __enter__(self) -> Irc:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["Address", "ConnectionState", "Irc", "split_address"]
