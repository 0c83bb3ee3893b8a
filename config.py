import os

from models import SECTION_NAMES

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _read_port(default=3000):
    """Parse PORT from the environment, falling back to the default on bad input"""
    try:
        port = int(os.environ.get('PORT', default))
    except (TypeError, ValueError):
        return default
    return port or default


class Config:
    """Base configuration"""

    # Runtime mode
    MODE = 'development'
    PORT = _read_port()

    # Content Settings
    DATA_DIR = os.environ.get('DATA_DIR', os.path.join(BASE_DIR, 'data'))
    SUPPORTED_LOCALES = ('pt-BR', 'en')
    DEFAULT_LOCALE = 'en'
    LOCALE_SECTIONS = SECTION_NAMES

    # Static Settings
    PUBLIC_DIR = os.environ.get('PUBLIC_DIR', os.path.join(BASE_DIR, 'public'))
    CNAME_PATH = os.environ.get('CNAME_PATH', os.path.join(BASE_DIR, 'CNAME'))

    # Structured metadata
    SITE_URL = os.environ.get('SITE_URL', 'https://joaovjo.com.br')

    # JSON Settings
    JSON_AS_ASCII = False


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    TEMPLATES_AUTO_RELOAD = True


class ProductionConfig(Config):
    """Production configuration"""
    MODE = 'production'
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = False
    TESTING = True


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, or from NODE_ENV when no name is given"""
    env = config_name or os.environ.get('NODE_ENV', 'development')
    return config.get(env, config['default'])
