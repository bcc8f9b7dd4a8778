"""Application configuration and logging setup."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .models import ItemKind, TrackedItem

load_dotenv()

# Bad environment values are collected here and reported by Config.validate().
_env_errors: List[str] = []


def _env_number(name: str, default: Any, cast: Callable[[str], Any]) -> Any:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        _env_errors.append(f"{name}={raw!r} is not a valid {cast.__name__}")
        return default


def _env_log_level(name: str = "LOG_LEVEL", default: str = "INFO") -> str:
    level = os.getenv(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        _env_errors.append(f"{name}={level!r} is not a logging level")
        return default
    return level


logging.basicConfig(
    level=_env_log_level(),
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


class Config:
    """Runtime settings sourced from the environment."""

    WATCH_CONFIG_PATH: str = os.getenv("WATCH_CONFIG_PATH", "config.json")
    FULFILLMENT_ENDPOINT: str = os.getenv(
        "FULFILLMENT_ENDPOINT", "https://www.apple.com/tw/shop/fulfillment-messages"
    )
    STORE_LOCATION: str = os.getenv("STORE_LOCATION", "11061")
    LINE_PUSH_URL: str = "https://api.line.me/v2/bot/message/push"
    POLL_INTERVAL: float = _env_number("POLL_INTERVAL", 30.0, float)
    HEARTBEAT_INTERVAL: int = _env_number("HEARTBEAT_INTERVAL", 86400, int)
    # None leaves requests without a timeout
    REQUEST_TIMEOUT: Optional[float] = _env_number("REQUEST_TIMEOUT", None, float)
    SUPPRESS_EMPTY_NOTIFICATIONS: bool = (
        os.getenv("SUPPRESS_EMPTY_NOTIFICATIONS", "False").lower() == "true"
    )

    @staticmethod
    def validate() -> None:
        if _env_errors:
            raise ConfigError("Invalid environment settings: " + "; ".join(_env_errors))


HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/127.0.0.0 Safari/537.36"
    ),
}


@dataclass
class WatchConfig:
    """Recipient credentials and tracked items read from the watch file."""

    user_id: str
    channel_access_token: str
    items: List[TrackedItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WatchConfig":
        try:
            user_id = str(data["userId"])
            token = str(data["channelAccessToken"])
        except KeyError as exc:
            raise ConfigError(f"Missing required field: {exc.args[0]}") from exc
        except TypeError as exc:
            raise ConfigError("Watch config must be a JSON object") from exc

        items = [TrackedItem(str(url), ItemKind.URL) for url in data.get("fulfillmentUrls") or []]
        items += [TrackedItem(str(part), ItemKind.PART) for part in data.get("partNumbers") or []]
        return cls(user_id=user_id, channel_access_token=token, items=items)


def load_watch_config(path: str | None = None) -> WatchConfig:
    """Read the JSON watch file. Any failure here is fatal for the process."""
    path = path or Config.WATCH_CONFIG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read watch config {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"Invalid JSON in watch config {path}: {exc}") from exc

    watch_config = WatchConfig.from_dict(data)
    if not watch_config.items:
        logger.warning("No fulfillmentUrls or partNumbers configured in %s", path)
    logger.info("Loaded %s tracked items from %s", len(watch_config.items), path)
    return watch_config
