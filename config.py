import os


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name, default):
    value = os.environ.get(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split('|') if item.strip()]


class Config:
    """Base configuration"""

    # Flask Settings
    MAX_CONTENT_LENGTH = 64 * 1024  # contact payloads are small

    # Server Settings
    PORT = int(os.environ.get('PORT', '3001'))
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Number of reverse proxies whose X-Forwarded-For entry is trusted
    PROXY_FIX_X_FOR = int(os.environ.get('PROXY_FIX_X_FOR', '0'))

    # Mail Settings
    EMAIL_USER = os.environ.get('EMAIL_USER')
    EMAIL_PASS = os.environ.get('EMAIL_PASS')
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', '587'))
    SMTP_USE_TLS = _env_bool('SMTP_USE_TLS', True)
    MAIL_SEND_TIMEOUT = float(os.environ.get('MAIL_SEND_TIMEOUT', '10'))
    RECIPIENT_EMAIL = os.environ.get('RECIPIENT_EMAIL')

    # Contact Settings
    # JWT_SECRET is the legacy name of the same value
    CONTACT_SHARED_SECRET = os.environ.get('CONTACT_SHARED_SECRET', os.environ.get('JWT_SECRET'))
    SITE_OWNER_NAME = os.environ.get('SITE_OWNER_NAME', 'Sujeet Kumar')

    # Rate Limiting
    RATE_LIMIT_MAX_REQUESTS = int(os.environ.get('RATE_LIMIT_MAX_REQUESTS', '2'))
    RATE_LIMIT_WINDOW = int(os.environ.get('RATE_LIMIT_WINDOW', str(10 * 60)))
    RATE_LIMIT_MESSAGE = os.environ.get(
        'RATE_LIMIT_MESSAGE',
        'Too many requests received from your end, please do-not bother...'
    )

    # Presentation Settings (pixels)
    HIDE_WELCOME = float(os.environ.get('HIDE_WELCOME', '800'))
    SCROLLED_OFFSET = float(os.environ.get('SCROLLED_OFFSET', '50'))
    SECTION_REVEAL_OFFSETS = {
        'about': 0,
        'projects': 400,
        'skills': 800,
        'contact': 1200,
    }
    TYPEWRITER_TEXTS = _env_list('TYPEWRITER_TEXTS', ['Full Stack Developer ', 'Problem Solver '])
    SOCIAL_LINKS = [
        {'name': 'Instagram', 'url': 'https://instagram.com/sujeet_kv'},
        {'name': 'LinkedIn', 'url': 'https://www.linkedin.com/in/sujeet-kumar-693b5128b/'},
    ]
    WELCOME_VIDEOS = {
        'top_left': '/silver.mp4',
        'top_right': '/robo.mp4',
        'top_right_most': '/astranaut.mp4',
        'bottom_right': '/venera.mp4',
    }


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    EMAIL_USER = 'relay@example.com'
    EMAIL_PASS = 'test-password'
    RECIPIENT_EMAIL = 'owner@example.com'
    CONTACT_SHARED_SECRET = 'test-shared-secret'
    SITE_OWNER_NAME = 'Test Owner'
    RATE_LIMIT_MAX_REQUESTS = 2
    RATE_LIMIT_WINDOW = 10 * 60
    HIDE_WELCOME = 800.0
    SCROLLED_OFFSET = 50.0
    TYPEWRITER_TEXTS = ['Full Stack Developer ', 'Problem Solver ']


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
