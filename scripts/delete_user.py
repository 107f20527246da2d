"""Delete a user together with its activation code, categories and expenses.

Usage:
    python -m scripts.delete_user <email>
"""

import asyncio
import sys

from scripts._services import open_services, run_or_fail, usage


async def delete_user(email: str) -> None:
    async with open_services() as services:
        await services.auth.delete_account(email)
    print(f"Deleted user {email}")


def main() -> None:
    if len(sys.argv) != 2:
        usage("scripts.delete_user <email>")
    asyncio.run(run_or_fail(delete_user(sys.argv[1])))


if __name__ == "__main__":
    main()
