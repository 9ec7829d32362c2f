"""
Tests for configuration models and constants.
"""

import pytest
from pydantic import ValidationError

from consolation import constants
from consolation.config import ClientSettings, ConnectionConfig
from consolation.irc.connection import split_address


class TestConnectionConfig:
    def test_defaults_are_empty(self):
        config = ConnectionConfig()
        assert config.password is None
        assert config.nickname is None
        assert config.capabilities == []
        assert config.keepalive is False

    def test_assignment_is_validated(self):
        config = ConnectionConfig()
        with pytest.raises(ValidationError):
            config.nickname = "bad nick"

    def test_capability_order_kept(self):
        config = ConnectionConfig(capabilities=["b", "a", "b"])
        assert config.capabilities == ["b", "a", "b"]


class TestClientSettings:
    def test_from_env_reads_password(self):
        settings = ClientSettings.from_env({constants.IRC_PASSWORD_ENV: "oauth:abc"})
        assert settings.password == "oauth:abc"
        assert settings.address == constants.IRC_SERVER_ADDRESS
        assert settings.nickname == constants.IRC_NICKNAME

    def test_from_env_reads_every_setting(self):
        settings = ClientSettings.from_env(
            {
                "IRC_SERVER_ADDRESS": "irc.example.org:6697",
                "IRC_NICKNAME": "bot",
                "IRC_CAPABILITIES": "twitch.tv/tags  twitch.tv/commands",
                "IRC_PASSWORD_ENV": "MY_PASS",
                "MY_PASS": "pw",
            }
        )
        assert settings == ClientSettings(
            address="irc.example.org:6697",
            nickname="bot",
            password="pw",
            capabilities=["twitch.tv/tags", "twitch.tv/commands"],
        )

    def test_from_env_blank_values_use_defaults(self):
        settings = ClientSettings.from_env(
            {"IRC_SERVER_ADDRESS": "  ", "IRC_NICKNAME": "", "IRC_CAPABILITIES": " "}
        )
        assert settings.address == constants.IRC_SERVER_ADDRESS
        assert settings.nickname == constants.IRC_NICKNAME
        assert settings.capabilities == list(constants.IRC_CAPABILITIES)
        assert settings.password is None

    def test_empty_password_counts_as_unset(self):
        assert ClientSettings.from_env({constants.IRC_PASSWORD_ENV: ""}).password is None

    def test_to_connection_config(self):
        settings = ClientSettings(
            nickname="bot", password="pw", capabilities=["twitch.tv/tags"]
        )
        config = settings.to_connection_config()
        assert config == ConnectionConfig(
            nickname="bot", password="pw", capabilities=["twitch.tv/tags"]
        )


class TestConstants:
    def test_env_int_fallback(self, monkeypatch, capsys):
        monkeypatch.setenv("SOME_INT", "nope")
        assert constants._get_env_int("SOME_INT", 5) == 5
        assert "Invalid integer value" in capsys.readouterr().out

    def test_env_float(self, monkeypatch):
        monkeypatch.setenv("SOME_FLOAT", "2.5")
        assert constants._get_env_float("SOME_FLOAT", 1.0) == 2.5

    def test_env_str_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("SOME_STR", "  ")
        assert constants._get_env_str("SOME_STR", "dflt") == "dflt"


class TestSplitAddress:
    @pytest.mark.parametrize(
        ("address", "expected"),
        [
            ("irc.chat.twitch.tv:6667", ("irc.chat.twitch.tv", 6667)),
            (("localhost", "6697"), ("localhost", 6697)),
            ("[::1]:6667", ("::1", 6667)),
            ("localhost", ("localhost", constants.IRC_DEFAULT_PORT)),
        ],
    )
    def test_valid(self, address, expected):
        assert split_address(address) == expected

    @pytest.mark.parametrize("address", ["irc://host:6667", ":6667", "host:port"])
    def test_invalid(self, address):
        with pytest.raises(ValueError):
            split_address(address)
