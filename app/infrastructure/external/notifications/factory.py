"""Notifier factory: creates the configured notification backend."""

import httpx

from app.application.interfaces.services import INotifier
from app.core.config import Settings
from app.domain.enums import NotifierBackend
from app.infrastructure.external.notifications.log_only import LogOnlyNotifier
from app.infrastructure.external.notifications.mailgun import MailgunNotifier
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class NotifierFactory:
    """Factory for notifier instances by settings.notifier_backend."""

    @classmethod
    def create_notifier(
        cls,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> INotifier:
        """Create notifier for settings.

        Args:
            settings: Application settings (backend and Mailgun credentials).
            http_client: Optional shared httpx.AsyncClient for connection reuse.

        Returns:
            MailgunNotifier or LogOnlyNotifier.
        """
        if settings.notifier_backend == NotifierBackend.MAILGUN:
            api_key = settings.mailgun_api_key
            logger.debug("Creating MailgunNotifier for domain %s", settings.mailgun_domain)
            return MailgunNotifier(
                api_key=api_key.get_secret_value() if api_key else "",
                domain=settings.mailgun_domain,
                endpoint=settings.mailgun_endpoint,
                sender_name=settings.mailgun_sender_name,
                sender_user=settings.mailgun_sender_user,
                timeout=settings.notification_timeout_seconds,
                http_client=http_client,
            )
        return LogOnlyNotifier()
