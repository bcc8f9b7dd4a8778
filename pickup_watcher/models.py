"""Domain models used by the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .exceptions import DecodeError

AVAILABLE = "available"
HEARTBEAT_LINE = "Checking service is still alive!"


def format_availability_line(title: str, store_name: str) -> str:
    return f"商品「{title}」在「{store_name}」可供訂購"


class ItemKind(str, Enum):
    URL = "url"
    PART = "part"


@dataclass(frozen=True)
class TrackedItem:
    value: str
    kind: ItemKind

    def __str__(self) -> str:
        return self.value


@dataclass
class PartAvailability:
    display_title: str
    pickup_status: str

    @property
    def is_available(self) -> bool:
        return self.pickup_status == AVAILABLE


@dataclass
class StoreEntry:
    store_name: str
    parts: Dict[str, PartAvailability] = field(default_factory=dict)


@dataclass
class AvailabilityPayload:
    """Decoded fulfillment response: a status marker and the pickup stores."""

    status: str = ""
    stores: List[StoreEntry] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "AvailabilityPayload":
        return cls()

    @classmethod
    def from_json(cls, data: Any) -> "AvailabilityPayload":
        """Build a payload from the raw response JSON.

        Missing sections and nulls decode to empty values. A section of the
        wrong type raises DecodeError.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
        try:
            status = _text((data.get("head") or {}).get("status"))
            pickup_message = (
                ((data.get("body") or {}).get("content") or {}).get("pickupMessage") or {}
            )
            stores = [_decode_store(store or {}) for store in pickup_message.get("stores") or []]
        except (AttributeError, TypeError) as exc:
            raise DecodeError(f"Unexpected payload shape: {exc}") from exc
        return cls(status=status, stores=stores)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _decode_store(store: Dict[str, Any]) -> StoreEntry:
    parts: Dict[str, PartAvailability] = {}
    for key, part in (store.get("partsAvailability") or {}).items():
        part = part or {}
        parts[str(key)] = PartAvailability(
            display_title=_text(part.get("storePickupProductTitle")),
            pickup_status=_text(part.get("pickupDisplay")),
        )
    return StoreEntry(store_name=_text(store.get("storeName")), parts=parts)
