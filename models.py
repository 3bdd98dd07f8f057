import unicodedata
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


def _has_control_characters(value):
    return any(unicodedata.category(char) == 'Cc' for char in value)


class ContactRequest(BaseModel):
    """Contact form submission; lives for one request and is never stored"""

    model_config = ConfigDict(extra='ignore', str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=40)
    message: str = Field(min_length=1, max_length=5000)
    shared_secret: str = Field(alias='sharedSecret')
    website: Optional[str] = None  # honeypot

    @field_validator('shared_secret', mode='before')
    @classmethod
    def _require_string_secret(cls, value):
        if not isinstance(value, str):
            raise ValueError('shared secret must be a string')
        return value

    @field_validator('name', 'phone', mode='after')
    @classmethod
    def _single_line(cls, value):
        # name ends up in a mail header
        if value is not None and _has_control_characters(value):
            raise ValueError('must not contain control characters')
        return value

    @field_validator('phone', mode='after')
    @classmethod
    def _blank_phone_is_missing(cls, value):
        return value or None

    @classmethod
    def from_payload(cls, payload):
        """Validate a request body; jwt_secretkey is the key older frontends still send"""
        if isinstance(payload, dict) and 'sharedSecret' not in payload and 'jwt_secretkey' in payload:
            payload = dict(payload, sharedSecret=payload['jwt_secretkey'])
        return cls.model_validate(payload)

    @property
    def is_spam(self):
        return bool(self.website)
