# storefront/core/limiter.py

from slowapi import Limiter
from slowapi.util import get_remote_address

# Requests are identified by client IP: the throttled endpoints (login,
# register) are called before a session exists. Counters live in memory.
limiter = Limiter(key_func=get_remote_address)
