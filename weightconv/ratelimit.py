from slowapi import Limiter
from slowapi.util import get_remote_address

from .settings import settings

# Rate limiter (per-IP), shared by the app and the routers
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def convert_limit() -> str:
    # Read on every request so the limit follows the live settings object
    return settings.convert_rate_limit
