from slowapi import Limiter
from slowapi.util import get_remote_address

from hr_master.core.config import settings

# Applied to every route through SlowAPIMiddleware
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
