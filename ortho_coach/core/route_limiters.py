"""
Description:
This module sets up a rate limiter for the application using SlowAPI.
It initializes a Limiter instance with a key function to identify clients by their IP address.
Limits only apply to routes decorated with limiter.limit.

Dependencies:
- slowapi: For rate limiting functionality.
- slowapi.util: For utility functions like get_remote_address to retrieve the client's IP address.
- loguru: For logging information about the rate limiter initialization.

Author: @kcaparas1630
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger
from ortho_coach.core.config import get_settings

settings = get_settings()

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
FEEDBACK_RATE_LIMIT = settings.feedback_rate_limit
logger.info(f"Rate limiter initialized (enabled={settings.rate_limit_enabled})")
