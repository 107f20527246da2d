"""ID and value generators (CUID row ids, numeric one-time codes)."""

import secrets

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2) for category/expense rows."""
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_numeric_code(digits: int = 6) -> str:
    """Return a uniformly random decimal code of exactly `digits` characters.

    Drawn from the OS CSPRNG over the full range 0 .. 10**digits - 1 and
    zero-padded, so "004217" is as likely as "999999".
    """
    if digits <= 0:
        raise ValueError("digits must be positive")
    return f"{secrets.randbelow(10**digits):0{digits}d}"
