"""
Contact Blueprint - Contact form relay
Handles: Validating submissions and relaying them by email
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api')

from . import routes
