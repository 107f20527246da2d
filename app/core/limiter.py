"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limits are per client address.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
AUTH_LIMIT = "10/minute"
ACTIVATION_LIMIT = "10/minute"
RESEND_LIMIT = "3/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"

limit_auth = limiter.limit(AUTH_LIMIT)
limit_activation = limiter.limit(ACTIVATION_LIMIT)
limit_resend = limiter.limit(RESEND_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
