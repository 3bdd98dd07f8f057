"""
Pages Blueprint - Public service endpoints
Handles: Liveness greeting, health check
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
