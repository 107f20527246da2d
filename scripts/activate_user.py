"""Activate a user with its emailed activation code.

Usage:
    python -m scripts.activate_user <email> <code>
Incorrect codes count towards the lockout exactly as on the web.
"""

import asyncio
import re
import sys

from scripts._services import fail, open_services, run_or_fail, usage

CODE_PATTERN = re.compile(r"[0-9]{6}")


async def activate_user(email: str, code: str) -> None:
    async with open_services() as services:
        await services.auth.verify_activation(email, code)
    print(f"Activated user {email}")


def main() -> None:
    if len(sys.argv) != 3:
        usage("scripts.activate_user <email> <code>")
    email, code = sys.argv[1], sys.argv[2]
    if not CODE_PATTERN.fullmatch(code):
        fail("The activation code must be exactly 6 digits.")
    asyncio.run(run_or_fail(activate_user(email, code)))


if __name__ == "__main__":
    main()
