"""Issue a fresh activation code for an unvalidated user and send it.

Usage:
    python -m scripts.notify_activation <email>
Unlike the web resend endpoint this reports unknown or already active users.
Reissuing also clears a lockout.
"""

import asyncio
import sys

from app.application.services.auth_service import normalize_email
from scripts._services import open_services, run_or_fail, usage


async def notify_activation(email: str) -> None:
    normalized = normalize_email(email)
    async with open_services() as services:
        issued = await services.activation.issue(normalized)
    print(
        f"Activation code sent to {issued.email} "
        f"(expires {issued.expiration_time.isoformat()})"
    )


def main() -> None:
    if len(sys.argv) != 2:
        usage("scripts.notify_activation <email>")
    asyncio.run(run_or_fail(notify_activation(sys.argv[1])))


if __name__ == "__main__":
    main()
