"""
Portfolio Blueprint - Presentation data for the frontend
Handles: Site content, scroll-driven frame parameters
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api')

from . import routes
