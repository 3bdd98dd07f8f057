"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import rate_limited
from .errors import (
    ContactError,
    ContactValidationError,
    UnauthorizedError,
    RateLimitExceeded,
    MailTransportError
)
from .notifications import Mailer, relay_contact_messages
from .security import (
    get_client_ip,
    RateLimiter,
    check_rate_limit,
    verify_shared_secret
)
from .helpers import (
    format_timestamp,
    build_operator_email,
    build_acknowledgment_email
)

__all__ = [
    # Decorators
    'rate_limited',

    # Errors
    'ContactError',
    'ContactValidationError',
    'UnauthorizedError',
    'RateLimitExceeded',
    'MailTransportError',

    # Notifications
    'Mailer',
    'relay_contact_messages',

    # Security
    'get_client_ip',
    'RateLimiter',
    'check_rate_limit',
    'verify_shared_secret',

    # Helpers
    'format_timestamp',
    'build_operator_email',
    'build_acknowledgment_email'
]
