"""Exceptions raised by the pickup watcher."""

from __future__ import annotations


class PickupWatcherError(Exception):
    """Base class for all watcher errors."""


class ConfigError(PickupWatcherError):
    """The watch file is missing, unreadable or malformed."""


class FetchError(PickupWatcherError):
    """The inventory endpoint could not be reached."""

    def __init__(self, item: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {item}: {reason}")
        self.item = item
        self.reason = reason


class DecodeError(PickupWatcherError):
    """An inventory response body was not a usable payload."""


class NotifyError(PickupWatcherError):
    """The push API rejected or never received a message."""
