"""Desktop notification delivery for finished countdowns."""

from __future__ import annotations

import logging

from plyer import notification

logger = logging.getLogger(__name__)

APP_NAME = "countdown"


class DesktopNotifier:
    """Sends a native desktop notification through plyer.

    Delivery is best effort: a missing notification backend or any other
    failure is logged and never raised to the caller.
    """

    def __init__(self, app_name: str = APP_NAME, timeout: int = 10):
        self.app_name = app_name
        self.timeout = timeout

    def notify(self, title: str, body: str) -> None:
        try:
            notification.notify(
                title=title,
                message=body,
                app_name=self.app_name,
                timeout=self.timeout,
            )
        except Exception as e:
            logger.warning("desktop notification failed: %s", e)


class NullNotifier:
    """Notifier used when notifications are disabled."""

    def notify(self, title: str, body: str) -> None:
        logger.debug("notification suppressed: %s", title)
