"""Notification templates: subject and body rendered with Jinja."""

from __future__ import annotations

from datetime import datetime

from jinja2 import Environment, Template

DEFAULT_ACTIVATION_SUBJECT = "Activation code for {{ app_name }}"
DEFAULT_ACTIVATION_BODY = "Activation code: {{ code }}"


class ActivationTemplateRenderer:
    """Renders the activation email; the code is inserted verbatim (leading zeros kept)."""

    def __init__(
        self,
        app_name: str,
        subject_template: str = DEFAULT_ACTIVATION_SUBJECT,
        body_template: str = DEFAULT_ACTIVATION_BODY,
    ) -> None:
        self._app_name = app_name
        self._env = Environment(autoescape=False)
        self._subject: Template = self._env.from_string(subject_template)
        self._body: Template = self._env.from_string(body_template)

    def render_activation(self, code: str, expires_at: datetime) -> tuple[str, str]:
        """Return (subject, body) for an activation code."""
        ctx = {"app_name": self._app_name, "code": code, "expires_at": expires_at}
        return self._subject.render(**ctx), self._body.render(**ctx)
