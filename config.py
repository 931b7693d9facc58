import os

from geolocation import DEFAULT_URL, DEFAULT_TIMEOUT

DEFAULT_PORT = 8000
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def get_port(environ=None):
    """Return the listen port from the environment, defaulting to 8000."""
    if environ is None:
        environ = os.environ
    value = (environ.get('PORT') or '').strip()
    if not value:
        return DEFAULT_PORT
    return int(value)


class Config:
    """Base configuration."""

    # Server settings
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # Front-end page, served only through the index route
    INDEX_PAGE_PATH = os.path.join(BASE_DIR, 'static', 'index.html')

    # Geolocation upstream
    GEO_API_URL = os.environ.get('GEO_API_URL') or DEFAULT_URL
    GEO_API_TIMEOUT = float(os.environ.get('GEO_API_TIMEOUT') or DEFAULT_TIMEOUT)  # seconds

    # Security Headers
    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'DENY',
        'Content-Security-Policy': "default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline'; img-src 'self' data:;",
        'Referrer-Policy': 'strict-origin-when-cross-origin',
    }


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    GEO_API_URL = 'http://geo.test/json/'
    GEO_API_TIMEOUT = 1.0


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
