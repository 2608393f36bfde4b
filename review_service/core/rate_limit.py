"""
Per-client rate limiting for the anonymous write endpoints
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from review_service.core.config import config

limiter = Limiter(key_func=get_remote_address, enabled=config.rate_limit_enabled)
