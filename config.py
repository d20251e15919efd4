import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # JSON Settings
    JSON_AS_ASCII = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Blog Settings
    POSTS_DIRECTORY = os.environ.get(
        'POSTS_DIRECTORY',
        os.path.join(os.path.dirname(os.path.abspath(__file__)), 'posts'))
    POSTS_PATTERN = os.environ.get('POSTS_PATTERN', '*.md')
    # Embedded list of {'title': ..., 'excerpt': ...} used instead of the directory
    POSTS_MANIFEST = None
    POSTS_LOAD_ASYNC = _env_flag('POSTS_LOAD_ASYNC', True)

    # Site Settings
    SITE_TITLE = 'My Portfolio'
    SITE_DESCRIPTION = ('A showcase of my work, including 3D models, '
                        'web development projects, and blog posts.')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    # Tests control when the catalog resolves
    POSTS_LOAD_ASYNC = False


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
