"""Once-a-day liveness line."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonitorState:
    # unix seconds, 0 means a heartbeat was never sent
    last_heartbeat: int = 0


def should_emit_heartbeat(now: int, last_heartbeat: int, interval: int = 86400) -> bool:
    return last_heartbeat == 0 or now - last_heartbeat >= interval


class HeartbeatGate:
    """Decide whether a cycle should carry the heartbeat line."""

    def __init__(self, interval: Optional[int] = None) -> None:
        self.interval = interval if interval is not None else Config.HEARTBEAT_INTERVAL

    def check(self, state: MonitorState, now: int) -> Tuple[bool, MonitorState]:
        if not should_emit_heartbeat(now, state.last_heartbeat, self.interval):
            return False, state
        logger.info("Heartbeat due (last sent at %s)", state.last_heartbeat)
        return True, replace(state, last_heartbeat=now)
