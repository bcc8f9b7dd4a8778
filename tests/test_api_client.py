from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_response, make_store
from pickup_watcher.api_client import FulfillmentAPIClient
from pickup_watcher.config import Config
from pickup_watcher.exceptions import FetchError
from pickup_watcher.models import ItemKind, TrackedItem


def make_client(session):
    return FulfillmentAPIClient(
        session=session,
        endpoint="https://shop.example.com/fulfillment-messages",
        location="11061",
        timeout=5,
    )


def test_part_params_include_identifier_and_fixed_options():
    client = make_client(MagicMock())
    params = client.build_params(TrackedItem("A1", ItemKind.PART), now_ms=1700000000000)
    assert params == [
        ("parts.0", "A1"),
        ("mt", "regular"),
        ("option.0", ""),
        ("location", "11061"),
        ("_", "1700000000000"),
    ]


def test_url_params_only_add_location_and_timestamp():
    client = make_client(MagicMock())
    item = TrackedItem("https://shop.example.com/f?parts.0=A1", ItemKind.URL)
    assert client.build_params(item, now_ms=42) == [("location", "11061"), ("_", "42")]
    assert client.build_url(item) == item.value


def test_part_item_targets_configured_endpoint():
    client = make_client(MagicMock())
    assert client.build_url(TrackedItem("A1", ItemKind.PART)) == "https://shop.example.com/fulfillment-messages"


def test_fetch_decodes_payload():
    session = MagicMock()
    session.get.return_value.json.return_value = make_response(
        [make_store("Store X", {"A1": ("Widget", "available")})]
    )
    client = make_client(session)

    payload = client.fetch(TrackedItem("A1", ItemKind.PART))

    assert payload.stores[0].store_name == "Store X"
    session.get.assert_called_once()
    _, kwargs = session.get.call_args
    assert kwargs["timeout"] == 5
    assert ("parts.0", "A1") in kwargs["params"]


def test_fetch_network_failure_raises_fetch_error():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("boom")
    client = make_client(session)

    with pytest.raises(FetchError) as excinfo:
        client.fetch(TrackedItem("A1", ItemKind.PART))
    assert excinfo.value.item == "A1"


@pytest.mark.parametrize("body", [ValueError("not json"), ["unexpected"], "text"])
def test_fetch_undecodable_body_is_empty_payload(body):
    session = MagicMock()
    if isinstance(body, Exception):
        session.get.return_value.json.side_effect = body
    else:
        session.get.return_value.json.return_value = body
    client = make_client(session)

    assert client.fetch(TrackedItem("A1", ItemKind.PART)).stores == []


def test_fetch_uses_client_default_timeout_when_unset(monkeypatch):
    monkeypatch.setattr(Config, "REQUEST_TIMEOUT", None)
    session = MagicMock()
    session.get.return_value.json.return_value = make_response([])
    client = FulfillmentAPIClient(session=session, endpoint="https://shop.example.com/f")

    client.fetch(TrackedItem("A1", ItemKind.PART))

    assert session.get.call_args.kwargs["timeout"] is None
