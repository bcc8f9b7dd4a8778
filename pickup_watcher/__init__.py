"""Core package for the store pickup watcher application."""

__all__ = [
    "config",
    "exceptions",
    "models",
    "api_client",
    "extractor",
    "heartbeat",
    "notifier",
    "checker",
    "cli",
]
