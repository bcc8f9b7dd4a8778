"""HTTP client for the retailer's pickup fulfillment endpoint."""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Tuple

import requests

from .config import HEADERS, Config
from .exceptions import DecodeError, FetchError
from .models import AvailabilityPayload, ItemKind, TrackedItem

logger = logging.getLogger(__name__)


class FulfillmentAPIClient:
    """Fetch store pickup availability for tracked items."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        endpoint: Optional[str] = None,
        location: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.session.headers.update(HEADERS)
        self.endpoint = endpoint or Config.FULFILLMENT_ENDPOINT
        self.location = location or Config.STORE_LOCATION
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT

    def build_url(self, item: TrackedItem) -> str:
        if item.kind is ItemKind.URL:
            return item.value
        return self.endpoint

    def build_params(self, item: TrackedItem, now_ms: Optional[int] = None) -> List[Tuple[str, str]]:
        """Query parameters for one request, including the cache-busting timestamp."""
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        params: List[Tuple[str, str]] = []
        if item.kind is ItemKind.PART:
            params += [("parts.0", item.value), ("mt", "regular"), ("option.0", "")]
        params += [("location", self.location), ("_", str(now_ms))]
        return params

    def fetch(self, item: TrackedItem) -> AvailabilityPayload:
        """GET the availability payload for one item.

        Raises FetchError when the request itself fails. A body that cannot
        be decoded is treated as a payload with no stores.
        """
        url = self.build_url(item)
        try:
            response = self.session.get(url, params=self.build_params(item), timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(str(item), str(exc)) from exc

        logger.debug("GET %s -> %s", response.url, response.status_code)
        try:
            return AvailabilityPayload.from_json(response.json())
        except (ValueError, DecodeError) as exc:
            logger.debug("Ignoring undecodable payload for %s: %s", item, exc)
            return AvailabilityPayload.empty()
