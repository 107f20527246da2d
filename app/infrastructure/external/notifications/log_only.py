"""Notifier that only logs (development and tests)."""

from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogOnlyNotifier:
    """INotifier that records the message in the log instead of sending it.

    The body is not logged since it carries the activation code.
    """

    async def send(self, to: str, subject: str, body: str) -> None:
        logger.info("Notification for %s not sent (log-only backend): %s", to, subject)
