"""Domain enumerations for the Firetrack application.

Enums represent fixed sets of domain values (e.g. activation state).
"""

from enum import Enum


class ActivationState(str, Enum):
    """Lifecycle of a user's activation code.

    NO_CODE -> CODE_ACTIVE -> ACTIVATED (terminal) | EXPIRED | LOCKED.
    EXPIRED and LOCKED persist the row; only a reissue returns to CODE_ACTIVE.
    """

    NO_CODE = "no_code"
    CODE_ACTIVE = "code_active"
    ACTIVATED = "activated"
    EXPIRED = "expired"
    LOCKED = "locked"


class NotifierBackend(str, Enum):
    """Outbound notification transport selected in settings."""

    LOG = "log"
    MAILGUN = "mailgun"
