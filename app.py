"""
Portfolio Backend - Main Application Entry Point
Built with the Application Factory Pattern

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import cors, mailer, rate_limiter
from utils.errors import ContactError, RateLimitExceeded

# Import all blueprints
from blueprints.contact import contact_bp
from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Trust forwarded client addresses only from configured proxies
    trusted_hops = app.config.get('PROXY_FIX_X_FOR', 0)
    if trusted_hops:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=trusted_hops)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio backend is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    cors.init_app(app, resources={r'/api/*': {'origins': app.config.get('CORS_ORIGINS', '*')}})
    mailer.init_app(app)
    rate_limiter.init_app(app)

    if mailer.is_configured:
        app.logger.info(f"✓ Mail transport configured for {mailer.host}:{mailer.port}")
    else:
        app.logger.warning("✗ Mail credentials missing - contact relay will answer 500")

    if not app.config.get('CONTACT_SHARED_SECRET'):
        app.logger.warning("✗ No shared secret configured - every contact request will be rejected")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(contact_bp)
    app.register_blueprint(portfolio_bp)
    app.logger.info(f"✓ Registered blueprints: {', '.join(app.blueprints)}")


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(ContactError)
    def contact_error(e):
        response = jsonify(e.to_dict())
        response.status_code = e.status_code
        if isinstance(e, RateLimitExceeded) and e.retry_after:
            response.headers['Retry-After'] = str(e.retry_after)
        return response

    @app.errorhandler(HTTPException)
    def http_error(e):
        if e.code is None or e.code < 400:
            # Routing redirects are HTTPExceptions too
            return e
        if e.code >= 500:
            app.logger.error(f"Server Error: {str(e)}")
        return jsonify({'success': False, 'error': e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def unhandled_error(e):
        app.logger.exception(f"Unhandled error: {str(e)}")
        return jsonify({'success': False, 'error': 'Internal server error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Cache-Control'] = 'no-store'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=app.config.get('PORT', 3001),
        debug=(env == 'development')
    )
