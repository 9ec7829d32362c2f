from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import constants


def _reject_line_breaks(value: str | None, what: str) -> str | None:
    if value is not None and ("\r" in value or "\n" in value):
        raise ValueError(f"{what} must not contain line breaks")
    return value


class ConnectionConfig(BaseModel):
    """Handshake settings staged by :class:`consolation.irc.IrcBuilder`.

    Attributes:
        password: Sent as ``PASS <password>`` when set.
        nickname: Sent as ``NICK <nickname>`` when set.
        capabilities: Requested in one ``CAP REQ`` line, in order.
        keepalive: Answer server ``PING`` lines while receiving.
    """

    model_config = ConfigDict(validate_assignment=True)

    password: str | None = None
    nickname: str | None = None
    capabilities: list[str] = Field(default_factory=list)
    keepalive: bool = False

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str | None:
        return _reject_line_breaks(v, "password")

    @field_validator("nickname")
    @classmethod
    def validate_nickname(cls, v: str | None) -> str | None:
        v = _reject_line_breaks(v, "nickname")
        if v is not None and (not v or any(c.isspace() for c in v)):
            raise ValueError("nickname must be a single non-empty word")
        return v

    @field_validator("capabilities")
    @classmethod
    def validate_capabilities(cls, v: list[str]) -> list[str]:
        for name in v:
            if not name or any(c.isspace() for c in name):
                raise ValueError(f"invalid capability name: {name!r}")
        return v


class ClientSettings(BaseModel):
    """Settings used by the command line entry point."""

    address: str = constants.IRC_SERVER_ADDRESS
    nickname: str | None = constants.IRC_NICKNAME
    password: str | None = None
    capabilities: list[str] = Field(
        default_factory=lambda: list(constants.IRC_CAPABILITIES)
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Build settings from environment variables.

        ``IRC_SERVER_ADDRESS``, ``IRC_NICKNAME`` and ``IRC_CAPABILITIES``
        (space-separated) are read from ``environ``; blank or missing values
        fall back to the defaults in :mod:`consolation.constants`. The
        password comes from the variable named by ``IRC_PASSWORD_ENV``
        (``TWITCH_OAUTH_PASS`` by default); an empty value counts as unset.
        """
        env = os.environ if environ is None else environ

        def value(name: str, default: str) -> str:
            return (env.get(name) or "").strip() or default

        password_env = value("IRC_PASSWORD_ENV", constants.IRC_PASSWORD_ENV)
        return cls(
            address=value("IRC_SERVER_ADDRESS", constants.IRC_SERVER_ADDRESS),
            nickname=value("IRC_NICKNAME", constants.IRC_NICKNAME),
            password=env.get(password_env) or None,
            capabilities=value(
                "IRC_CAPABILITIES", " ".join(constants.IRC_CAPABILITIES)
            ).split(),
        )

    def to_connection_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            password=self.password,
            nickname=self.nickname,
            capabilities=list(self.capabilities),
        )
