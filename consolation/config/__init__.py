"""Configuration models."""

from .model import ClientSettings, ConnectionConfig  # noqa: F401

__all__ = ["ClientSettings", "ConnectionConfig"]
