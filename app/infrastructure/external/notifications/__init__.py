"""Outbound notifications: Mailgun and log-only backends, activation templates."""

from app.infrastructure.external.notifications.factory import NotifierFactory
from app.infrastructure.external.notifications.log_only import LogOnlyNotifier
from app.infrastructure.external.notifications.mailgun import MailgunNotifier
from app.infrastructure.external.notifications.templates import ActivationTemplateRenderer

__all__ = [
    "ActivationTemplateRenderer",
    "LogOnlyNotifier",
    "MailgunNotifier",
    "NotifierFactory",
]
