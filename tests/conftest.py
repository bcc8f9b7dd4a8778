"""Shared fixtures: canned fulfillment payloads and fake collaborators."""

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from pickup_watcher.models import AvailabilityPayload


def make_response(stores: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Raw fulfillment JSON in the retailer's shape."""
    return {
        "head": {"status": "200", "data": {}},
        "body": {"content": {"pickupMessage": {"stores": stores}}},
    }


def make_store(name: str, parts: Dict[str, tuple]) -> Dict[str, Any]:
    return {
        "storeName": name,
        "partsAvailability": {
            key: {"storePickupProductTitle": title, "pickupDisplay": status}
            for key, (title, status) in parts.items()
        },
    }


def make_payload(stores: List[Dict[str, Any]]) -> AvailabilityPayload:
    return AvailabilityPayload.from_json(make_response(stores))


@pytest.fixture
def notifier():
    fake = MagicMock()
    fake.send.return_value = True
    return fake


@pytest.fixture
def api_client():
    return MagicMock()
