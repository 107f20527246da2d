"""Infrastructure exceptions for external operations.

They extend InfrastructureException so presentation maps them to 503
consistently and the activation flow can log and continue.
"""

from app.domain.exceptions import InfrastructureException


class NotificationDeliveryException(InfrastructureException):
    """A notification could not be delivered (transport error or non-2xx reply)."""

    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__(
            f"Failed to deliver notification to {recipient}",
            "NOTIFICATION_DELIVERY_FAILED",
            {"recipient": recipient, "reason": reason},
        )
