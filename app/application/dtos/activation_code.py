"""DTOs for activation codes."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ActivationCodeResult:
    """Pending activation code as stored (code keeps its leading zeros)."""

    email: str
    code: str
    expiration_time: datetime
    attempts: int

    def is_expired(self, now: datetime) -> bool:
        """Expired strictly after expiration_time."""
        return now > self.expiration_time

    def is_locked(self, max_attempts: int) -> bool:
        return self.attempts >= max_attempts
