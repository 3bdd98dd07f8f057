"""
Decorators Module - Request gating decorators
"""

from functools import wraps
from flask import current_app
from .errors import RateLimitExceeded
from .security import check_rate_limit, get_client_ip


def rate_limited(endpoint):
    """Decorator to reject requests over the per-client rolling limit"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            allowed, retry_after = check_rate_limit(endpoint)
            if not allowed:
                current_app.logger.warning(
                    f"Rate limit exceeded for {get_client_ip()} on {endpoint}")
                raise RateLimitExceeded(
                    current_app.config.get('RATE_LIMIT_MESSAGE', 'Too many requests.'),
                    retry_after=retry_after
                )
            return f(*args, **kwargs)
        return decorated_function
    return decorator
