"""Create an unvalidated user and send its activation code.

Usage:
    python -m scripts.create_user <email> <password>
"""

import asyncio
import sys

from scripts._services import open_services, run_or_fail, usage


async def create_user(email: str, password: str) -> None:
    async with open_services() as services:
        user = await services.auth.register(email, password)
    print(f"Created user {user.email}; an activation code has been sent.")


def main() -> None:
    if len(sys.argv) != 3:
        usage("scripts.create_user <email> <password>")
    asyncio.run(run_or_fail(create_user(sys.argv[1], sys.argv[2])))


if __name__ == "__main__":
    main()
