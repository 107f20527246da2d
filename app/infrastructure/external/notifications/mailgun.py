"""Mailgun notifier: sends plain-text email through the Mailgun messages API."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx

from app.infrastructure.exceptions import NotificationDeliveryException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class MailgunNotifier:
    """INotifier backed by POST {endpoint}/{domain}/messages with basic auth api:{key}."""

    def __init__(
        self,
        *,
        api_key: str,
        domain: str,
        endpoint: str = "https://api.mailgun.net/v3",
        sender_name: str = "Firetrack team",
        sender_user: str = "no-reply",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key or not domain:
            raise ValueError("Mailgun api_key and domain are required")
        self._api_key = api_key
        self._domain = domain
        self._url = f"{endpoint.rstrip('/')}/{domain}/messages"
        self._sender = f"{sender_name} <{sender_user}@{domain}>"
        self._timeout = timeout
        self._shared_http = http_client

    @property
    def url(self) -> str:
        return self._url

    @property
    def sender(self) -> str:
        return self._sender

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient() as client:
            yield client

    async def send(self, to: str, subject: str, body: str) -> None:
        """Send one message.

        Raises:
            NotificationDeliveryException: On transport errors or a non-2xx response.
        """
        data = {"from": self._sender, "to": to, "subject": subject, "text": body}
        try:
            async with self._http_cm() as client:
                response = await client.post(
                    self._url,
                    auth=("api", self._api_key),
                    data=data,
                    timeout=self._timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Mailgun rejected message to %s: HTTP %s", to, e.response.status_code
            )
            raise NotificationDeliveryException(
                to, f"HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Mailgun request for %s failed: %s", to, e)
            raise NotificationDeliveryException(to, str(e) or type(e).__name__) from e
        logger.debug("Mailgun accepted message to %s", to)
