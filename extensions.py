"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.
"""

from flask_cors import CORS
from utils.notifications import Mailer
from utils.security import RateLimiter

# Initialize extensions without binding to app
cors = CORS()
mailer = Mailer()
rate_limiter = RateLimiter()

__all__ = ['cors', 'mailer', 'rate_limiter']
