"""
Configuration constants for the consolation chat client

Each constant can be overridden by setting an environment variable with the
same name.
"""

import os


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Server
IRC_SERVER_ADDRESS = _get_env_str("IRC_SERVER_ADDRESS", "irc.chat.twitch.tv:6667")
IRC_DEFAULT_PORT = _get_env_int("IRC_DEFAULT_PORT", 6667)
IRC_CONNECT_TIMEOUT = _get_env_float("IRC_CONNECT_TIMEOUT", 10.0)  # seconds

# Session
IRC_NICKNAME = _get_env_str("IRC_NICKNAME", "meownadic")
IRC_CAPABILITIES = tuple(_get_env_str("IRC_CAPABILITIES", "twitch.tv/tags").split())
IRC_PASSWORD_ENV = _get_env_str("IRC_PASSWORD_ENV", "TWITCH_OAUTH_PASS")

# Wire
IRC_LINE_TERMINATOR = "\r\n"
IRC_ENCODING = "utf-8"
