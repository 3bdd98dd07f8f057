"""
Errors Module - Failure taxonomy of the contact relay

Every error carries the HTTP status it maps to and knows how to render
itself as the JSON body returned to the caller.
"""


class ContactError(Exception):
    """Base class for contact relay failures"""

    status_code = 500
    body_key = 'error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'success': False, self.body_key: self.message}


class ContactValidationError(ContactError):
    """Payload failed the schema check"""

    status_code = 400
    body_key = 'message'

    def __init__(self, message='input fields are not valid', errors=None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self):
        payload = super().to_dict()
        payload['errors'] = self.errors
        return payload


class UnauthorizedError(ContactError):
    """Shared secret did not match"""

    status_code = 401

    def __init__(self, message='Unauthorized'):
        super().__init__(message)


class RateLimitExceeded(ContactError):
    """Client exceeded the rolling request window"""

    status_code = 429

    def __init__(self, message, retry_after=None):
        super().__init__(message)
        self.retry_after = retry_after


class MailTransportError(ContactError):
    """Outbound mail could not be delivered to the provider"""

    status_code = 500


__all__ = [
    'ContactError',
    'ContactValidationError',
    'UnauthorizedError',
    'RateLimitExceeded',
    'MailTransportError',
]
