#!/usr/bin/env python3
"""
Command line entry point: print the chat of one channel.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import constants
from .config.model import ClientSettings
from .errors.handling import log_error
from .errors.internal import InternalError
from .irc.builder import IrcBuilder
from .irc.models import PrivateMessage
from .logging_config import LoggerConfigurator
from .logs.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consolation",
        description="Print the chat messages of an IRC channel",
    )
    parser.add_argument("channel", help="channel name, without the leading '#'")
    return parser


def print_messages(settings: ClientSettings, channel: str) -> None:
    """Connect with ``settings``, join ``channel`` and print until closed."""
    if settings.password is None:
        logger.log_event(
            "app", "missing_password", level=logging.WARNING, env=constants.IRC_PASSWORD_ENV
        )
    builder = IrcBuilder(settings.to_connection_config())
    with builder.connect(settings.address) as irc:
        irc.join(channel)
        for message in irc:
            if isinstance(message, PrivateMessage):
                print(f"{message.username}: {message.body}", flush=True)


def run(argv: Sequence[str] | None = None) -> int:
    """Synchronous entry point for the application.

    Returns:
        Process exit code: 0 on a clean close or Ctrl-C, 1 on errors.
    """
    args = build_parser().parse_args(argv)
    LoggerConfigurator().configure()
    logger.log_event("app", "start")
    try:
        print_messages(ClientSettings.from_env(), args.channel.lstrip("#"))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted")
        return 0
    except (InternalError, OSError, ValueError) as e:
        log_error("Chat client error", e)
        return 1
    logger.log_event("app", "shutdown")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
