"""Pickup availability orchestration."""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence

from .api_client import FulfillmentAPIClient
from .config import Config, WatchConfig
from .exceptions import FetchError
from .extractor import extract_available_lines
from .heartbeat import HeartbeatGate, MonitorState
from .models import HEARTBEAT_LINE, TrackedItem
from .notifier import LineNotifier

logger = logging.getLogger(__name__)


def compose_message(lines: Sequence[str], heartbeat: bool) -> str:
    if heartbeat:
        lines = [HEARTBEAT_LINE, *lines]
    return "\n".join(lines)


class AvailabilityChecker:
    """Coordinate fetching, heartbeat tracking, and notifications."""

    def __init__(
        self,
        items: Sequence[TrackedItem],
        api_client: FulfillmentAPIClient,
        notifier: LineNotifier,
        heartbeat_gate: Optional[HeartbeatGate] = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.items = list(items)
        self.api_client = api_client
        self.notifier = notifier
        self.heartbeat_gate = heartbeat_gate or HeartbeatGate()
        self.clock = clock
        self.sleep = sleep

    @classmethod
    def from_watch_config(cls, watch_config: WatchConfig, dry_run: bool = False) -> "AvailabilityChecker":
        notifier = LineNotifier(
            watch_config.user_id,
            watch_config.channel_access_token,
            log_to_console=dry_run,
        )
        return cls(watch_config.items, FulfillmentAPIClient(), notifier)

    def collect_lines(self) -> List[str]:
        """Fetch every tracked item in order and gather its availability lines."""
        lines: List[str] = []
        for idx, item in enumerate(self.items, start=1):
            logger.info("%s. Checking %s ...", idx, item)
            try:
                payload = self.api_client.fetch(item)
            except FetchError as exc:
                logger.error("%s", exc)
                continue
            item_lines = list(extract_available_lines(payload, item))
            logger.debug("%s available pickup entries for %s", len(item_lines), item)
            lines.extend(item_lines)
        return lines

    def run_cycle(self, state: MonitorState, now: Optional[int] = None) -> MonitorState:
        """Run one fetch, extract, notify pass and return the updated state."""
        logger.info("Start to check product...")
        lines = self.collect_lines()
        if now is None:
            now = int(self.clock())
        heartbeat, state = self.heartbeat_gate.check(state, now)
        self.notifier.send(compose_message(lines, heartbeat))
        logger.info("Finish checking product.")
        return state

    def run_forever(self, interval: Optional[float] = None, state: Optional[MonitorState] = None) -> None:
        interval = interval if interval is not None else Config.POLL_INTERVAL
        state = state or MonitorState()
        while True:
            state = self.run_cycle(state)
            self.sleep(interval)

    def run(self, once: bool = False) -> None:
        if once:
            self.run_cycle(MonitorState())
            return
        self.run_forever()
