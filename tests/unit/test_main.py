"""
Tests for the command line entry point.
"""

import io
from unittest.mock import MagicMock, patch

import pytest

from consolation import main as app
from consolation.config import ClientSettings
from consolation.errors import MappingError, NetworkError
from consolation.irc.models import PrivateMessage


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch.object(app, "LoggerConfigurator") as configurator:
        yield configurator


@pytest.fixture
def fake_irc():
    irc = MagicMock()
    irc.__enter__.return_value = irc
    irc.__iter__.return_value = iter(
        [
            PrivateMessage(username="alice", body="hello world", channel="#chan"),
            PrivateMessage(username="bob", body="hi", channel="#chan"),
        ]
    )
    return irc


def test_prints_messages(fake_irc, capsys, monkeypatch):
    monkeypatch.setenv("TWITCH_OAUTH_PASS", "oauth:x")
    with patch.object(app.IrcBuilder, "connect", return_value=fake_irc) as connect:
        assert app.run(["somechannel"]) == 0
    connect.assert_called_once_with(ClientSettings().address)
    fake_irc.join.assert_called_once_with("somechannel")
    assert capsys.readouterr().out == "alice: hello world\nbob: hi\n"


def test_leading_hash_is_stripped(fake_irc):
    with patch.object(app.IrcBuilder, "connect", return_value=fake_irc):
        app.run(["#somechannel"])
    fake_irc.join.assert_called_once_with("somechannel")


def test_missing_channel_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        app.run([])
    assert exc_info.value.code == 2
    assert "usage" in capsys.readouterr().err


@pytest.mark.parametrize(
    "error", [NetworkError("unreachable"), MappingError("PRIVMSG missing prefix")]
)
def test_errors_give_exit_code_one(error):
    with patch.object(app.IrcBuilder, "connect", side_effect=error):
        with patch.object(app, "log_error") as log_error:
            assert app.run(["chan"]) == 1
    log_error.assert_called_once_with("Chat client error", error)


def test_keyboard_interrupt_exits_cleanly():
    with patch.object(app.IrcBuilder, "connect", side_effect=KeyboardInterrupt):
        assert app.run(["chan"]) == 0


def test_print_messages_uses_settings(fake_irc):
    settings = ClientSettings(
        address="localhost:6667", nickname="bot", password="pw", capabilities=["c"]
    )
    with patch.object(app.IrcBuilder, "connect", return_value=fake_irc) as connect:
        with patch("sys.stdout", new_callable=io.StringIO):
            app.print_messages(settings, "chan")
    connect.assert_called_once_with("localhost:6667")
