"""Turn fulfillment payloads into availability lines."""

from __future__ import annotations

from typing import Iterator

from .models import AvailabilityPayload, ItemKind, TrackedItem, format_availability_line


def extract_available_lines(payload: AvailabilityPayload, item: TrackedItem) -> Iterator[str]:
    """Yield one line per store offering the item for pickup.

    URL-tracked items report every available part in each store. Part
    number items only look at the entry keyed by that part number.
    Stores and parts are visited in payload order.
    """
    for store in payload.stores:
        if item.kind is ItemKind.URL:
            candidates = list(store.parts.values())
        else:
            part = store.parts.get(item.value)
            candidates = [part] if part is not None else []

        for part in candidates:
            if part.is_available:
                yield format_availability_line(part.display_title, store.store_name)
