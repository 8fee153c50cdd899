# jobagent/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from jobagent.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.ENABLE_RATE_LIMITING)


def maybe_limit(rule: str | None = None):
    # slowapi decorators bind at import time; with limiting off, leave the endpoint untouched.
    if not settings.ENABLE_RATE_LIMITING:
        def passthrough(fn):
            return fn
        return passthrough
    return limiter.limit(rule or settings.AUTH_RATE_LIMIT)
