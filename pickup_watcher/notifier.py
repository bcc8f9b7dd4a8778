"""LINE push notification helper."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import Config
from .exceptions import NotifyError

logger = logging.getLogger(__name__)


class LineNotifier:
    """Send availability messages to a LINE user through the push API."""

    def __init__(
        self,
        user_id: str,
        channel_access_token: str,
        session: Optional[requests.Session] = None,
        suppress_empty: Optional[bool] = None,
        log_to_console: bool = False,
    ) -> None:
        self.user_id = user_id
        self.channel_access_token = channel_access_token
        self.session = session or requests.Session()
        self.suppress_empty = (
            suppress_empty if suppress_empty is not None else Config.SUPPRESS_EMPTY_NOTIFICATIONS
        )
        self.log_to_console = log_to_console

    def build_payload(self, message: str) -> dict:
        return {
            "to": self.user_id,
            "messages": [{"type": "text", "text": message}],
        }

    def _post(self, message: str) -> None:
        headers = {
            "Authorization": f"Bearer {self.channel_access_token}",
            "Content-Type": "application/json",
        }
        try:
            response = self.session.post(
                Config.LINE_PUSH_URL,
                json=self.build_payload(message),
                headers=headers,
                timeout=Config.REQUEST_TIMEOUT,
            )
        except requests.RequestException as exc:
            raise NotifyError(f"Failed to reach LINE push API: {exc}") from exc
        if not response.ok:
            raise NotifyError(f"LINE API error: {response.status_code} {response.text}")

    def send(self, message: str) -> bool:
        """Deliver one message. Failures are logged and reported as False."""
        if not message and self.suppress_empty:
            logger.info("Nothing to report, skipping notification")
            return True

        if self.log_to_console:
            print("\n" + "=" * 50)
            print("DRY RUN - LINE Notification Preview:")
            print("=" * 50)
            print(message)
            print("=" * 50)
            return True

        try:
            self._post(message)
        except NotifyError as exc:
            logger.error("Failed to send LINE notification: %s", exc)
            return False
        logger.info("Notification sent (%s lines)", len(message.splitlines()))
        return True
