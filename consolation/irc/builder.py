"""Builder used to configure and open an :class:`Irc` connection."""

from __future__ import annotations

from ..config.model import ConnectionConfig
from .connection import Address, Irc


class IrcBuilder:
    """Stage the handshake settings for one connection.

    Example::

        irc = (
            IrcBuilder()
            .with_nickname("nickname")
            .with_password("oauth:...")
            .with_capability("twitch.tv/tags")
            .with_capability("twitch.tv/membership")
            .connect("irc.chat.twitch.tv:6667")
        )
        irc.join("channel")
        for message in irc:
            print(message)

    Setters validate their input immediately (pydantic ``ValidationError``).
    The builder is consumed by :meth:`connect` and cannot be reused.
    """

    def __init__(self, config: ConnectionConfig | None = None) -> None:
        self._config: ConnectionConfig | None = (
            config.model_copy(deep=True) if config is not None else ConnectionConfig()
        )

    def _staged(self) -> ConnectionConfig:
        if self._config is None:
            raise RuntimeError("IrcBuilder has already been used to connect")
        return self._config

    def with_password(self, password: str) -> IrcBuilder:
        """A ``PASS`` line is sent on connect."""
        self._staged().password = password
        return self

    def with_nickname(self, nickname: str) -> IrcBuilder:
        """A ``NICK`` line is sent on connect."""
        self._staged().nickname = nickname
        return self

    def with_capability(self, capability_name: str) -> IrcBuilder:
        """Append a capability to request; may be called repeatedly.

        All capabilities go out in a single ``CAP REQ`` line on connect.
        """
        config = self._staged()
        # Reassign so validate_assignment checks the new name.
        config.capabilities = [*config.capabilities, capability_name]
        return self

    def with_keepalive(self, enabled: bool = True) -> IrcBuilder:
        """Answer server ``PING`` lines with ``PONG`` while receiving."""
        self._staged().keepalive = enabled
        return self

    def connect(self, address: Address) -> Irc:
        """Connect and run the handshake, returning the session handle.

        Do not include ``irc://`` in ``address``.

        Raises:
            NetworkError: if the connection or a handshake write fails.
            RuntimeError: if this builder was already consumed.
        """
        config = self._staged()
        self._config = None
        return Irc.connect(config, address)


__all__ = ["IrcBuilder"]
