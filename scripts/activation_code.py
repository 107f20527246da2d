"""Inspect and clean up pending activation codes.

Usage:
    python -m scripts.activation_code show <email>
    python -m scripts.activation_code delete <email>
    python -m scripts.activation_code purge
"""

import asyncio
import sys

from scripts._services import fail, open_services, run_or_fail, usage

USAGE = "scripts.activation_code show|delete <email> | purge"


async def show(email: str) -> None:
    async with open_services() as services:
        pending = await services.activation.get_pending(email)
        state = await services.activation.get_state(email)
    if pending is None:
        fail(f"No pending activation code for {email} (state: {state.value})")
    print(f"email:      {pending.email}")
    print(f"code:       {pending.code}")
    print(f"expires:    {pending.expiration_time.isoformat()}")
    print(f"attempts:   {pending.attempts}")
    print(f"state:      {state.value}")


async def delete(email: str) -> None:
    async with open_services() as services:
        deleted = await services.activation.delete(email)
    if not deleted:
        fail(f"No pending activation code for {email}")
    print(f"Deleted activation code for {email}")


async def purge() -> None:
    async with open_services() as services:
        count = await services.activation.purge_expired()
    print(f"Purged {count} expired activation code(s)")


def main() -> None:
    args = sys.argv[1:]
    if args[:1] in (["show"], ["delete"]) and len(args) == 2:
        command = show if args[0] == "show" else delete
        asyncio.run(run_or_fail(command(args[1])))
    elif args == ["purge"]:
        asyncio.run(run_or_fail(purge()))
    else:
        usage(USAGE)


if __name__ == "__main__":
    main()
