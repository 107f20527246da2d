"""Delete revoked session ids whose tokens are past their expiry.

Usage:
    python -m scripts.purge_sessions
"""

import asyncio
import sys

from scripts._services import open_services, run_or_fail, usage


async def purge_sessions() -> None:
    async with open_services() as services:
        count = await services.auth.purge_revoked_sessions()
    print(f"Purged {count} expired revoked session(s)")


def main() -> None:
    if len(sys.argv) != 1:
        usage("scripts.purge_sessions")
    asyncio.run(run_or_fail(purge_sessions()))


if __name__ == "__main__":
    main()
