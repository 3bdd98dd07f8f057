"""
Pages Routes - Public service endpoints
"""

from flask import jsonify, current_app
from . import pages_bp


@pages_bp.route('/')
def index():
    """Static greeting used as a liveness probe"""
    owner = current_app.config.get('SITE_OWNER_NAME', '')
    return jsonify({
        'message': 'Welcome to the backend server!',
        'say': f'Server is running successfully, {owner}'.rstrip(', ')
    })
