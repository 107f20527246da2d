"""Tests for notification backends, the factory and activation templates."""

import base64
import logging
from datetime import UTC, datetime
from urllib.parse import parse_qs

import httpx
import pytest

from app.core.config import Settings
from app.infrastructure.exceptions import NotificationDeliveryException
from app.infrastructure.external.notifications import (
    ActivationTemplateRenderer,
    LogOnlyNotifier,
    MailgunNotifier,
    NotifierFactory,
)
from app.shared.utils.generators import generate_numeric_code


def _mailgun(handler, **overrides) -> MailgunNotifier:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    kwargs = {"api_key": "key-123", "domain": "mg.example.com", "http_client": client}
    kwargs.update(overrides)
    return MailgunNotifier(**kwargs)


class TestMailgunNotifier:
    async def test_posts_form_with_basic_auth(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": "<msg@mg.example.com>"})

        notifier = _mailgun(handler)
        await notifier.send("user@example.com", "Activation code for firetrack", "Activation code: 012345")

        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.mailgun.net/v3/mg.example.com/messages"
        expected = base64.b64encode(b"api:key-123").decode()
        assert request.headers["authorization"] == f"Basic {expected}"
        form = parse_qs(request.content.decode())
        assert form == {
            "from": ["Firetrack team <no-reply@mg.example.com>"],
            "to": ["user@example.com"],
            "subject": ["Activation code for firetrack"],
            "text": ["Activation code: 012345"],
        }

    def test_custom_endpoint_and_sender(self) -> None:
        notifier = MailgunNotifier(
            api_key="k",
            domain="mg.example.com",
            endpoint="https://api.eu.mailgun.net/v3/",
            sender_name="Budget",
            sender_user="hello",
        )
        assert notifier.url == "https://api.eu.mailgun.net/v3/mg.example.com/messages"
        assert notifier.sender == "Budget <hello@mg.example.com>"

    async def test_error_status_raises_delivery_exception(self) -> None:
        notifier = _mailgun(lambda request: httpx.Response(500))
        with pytest.raises(NotificationDeliveryException) as exc_info:
            await notifier.send("user@example.com", "s", "b")
        assert exc_info.value.details == {"recipient": "user@example.com", "reason": "HTTP 500"}

    async def test_transport_error_raises_delivery_exception(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        notifier = _mailgun(handler)
        with pytest.raises(NotificationDeliveryException):
            await notifier.send("user@example.com", "s", "b")

    @pytest.mark.parametrize("missing", ["api_key", "domain"])
    def test_credentials_required(self, missing: str) -> None:
        kwargs = {"api_key": "k", "domain": "mg.example.com", missing: ""}
        with pytest.raises(ValueError):
            MailgunNotifier(**kwargs)


class TestLogOnlyNotifier:
    async def test_logs_subject_but_not_body(self, caplog) -> None:
        with caplog.at_level(logging.INFO):
            await LogOnlyNotifier().send("user@example.com", "Activation code for firetrack", "Activation code: 987654")
        assert "Activation code for firetrack" in caplog.text
        assert "987654" not in caplog.text


class TestNotifierFactory:
    def _settings(self, **overrides) -> Settings:
        return Settings(
            _env_file=None,
            database_url="sqlite+aiosqlite:///:memory:",
            secret_key="k" * 32,
            **overrides,
        )

    def test_log_backend(self) -> None:
        assert isinstance(NotifierFactory.create_notifier(self._settings()), LogOnlyNotifier)

    def test_mailgun_backend(self) -> None:
        settings = self._settings(
            notifier_backend="mailgun", mailgun_api_key="key-1", mailgun_domain="mg.example.com"
        )
        notifier = NotifierFactory.create_notifier(settings)
        assert isinstance(notifier, MailgunNotifier)
        assert notifier.url.endswith("/mg.example.com/messages")


class TestActivationTemplates:
    def test_default_templates(self) -> None:
        renderer = ActivationTemplateRenderer(app_name="firetrack")
        subject, body = renderer.render_activation("004217", datetime(2026, 1, 1, tzinfo=UTC))
        assert subject == "Activation code for firetrack"
        assert body == "Activation code: 004217"

    def test_custom_body_can_use_expiry(self) -> None:
        renderer = ActivationTemplateRenderer(
            app_name="firetrack",
            body_template="{{ code }} valid until {{ expires_at.strftime('%H:%M') }}",
        )
        _, body = renderer.render_activation("123456", datetime(2026, 1, 1, 9, 30, tzinfo=UTC))
        assert body == "123456 valid until 09:30"


class TestNumericCode:
    def test_codes_are_six_digits(self) -> None:
        for _ in range(200):
            code = generate_numeric_code(6)
            assert len(code) == 6
            assert code.isdigit()

    def test_non_positive_digits_rejected(self) -> None:
        with pytest.raises(ValueError):
            generate_numeric_code(0)
