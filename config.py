import os
from dataclasses import dataclass


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing"""


def _as_bool(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'y', 'on')


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION'
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Server Settings
    PORT = 3657
    FORCE_HTTPS = False

    # Mail Settings
    MAIL_USERNAME = None
    MAIL_PASSWORD = None
    MAIL_SERVER = 'smtp.gmail.com'
    MAIL_PORT = 465
    MAIL_TIMEOUT = 30
    MAIL_SUBJECT = 'New message from contact form'

    # Site Settings
    SITE_NAME = 'Portfolio'


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    MAIL_USERNAME = 'owner@example.com'
    MAIL_PASSWORD = 'test-password'


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


def environment_overrides(environ=None):
    """
    Read deployment settings from the process environment.

    Only variables that are actually set are returned, so values from the
    selected config class survive when the environment is silent.
    """
    environ = os.environ if environ is None else environ
    overrides = {}

    if 'GMAIL_USER' in environ:
        overrides['MAIL_USERNAME'] = environ['GMAIL_USER']
    if 'GMAIL_PASS' in environ:
        overrides['MAIL_PASSWORD'] = environ['GMAIL_PASS']
    if 'SESSION_SECRET' in environ:
        overrides['SECRET_KEY'] = environ['SESSION_SECRET']
    if 'FORCE_HTTPS' in environ:
        overrides['FORCE_HTTPS'] = _as_bool(environ['FORCE_HTTPS'])

    for key in ('PORT', 'MAIL_TIMEOUT'):
        raw = environ.get(key)
        if raw:
            try:
                value = int(raw)
            except ValueError:
                raise ConfigurationError(f'environment variable: {key} must be an integer, got {raw!r}')
            if value <= 0:
                raise ConfigurationError(f'environment variable: {key} must be positive, got {raw!r}')
            overrides[key] = value

    return overrides


@dataclass(frozen=True)
class MailSettings:
    """Mailbox account and relay used for every contact form delivery"""

    username: str
    password: str
    host: str = 'smtp.gmail.com'
    port: int = 465
    subject: str = 'New message from contact form'
    timeout: float = 30

    @classmethod
    def from_config(cls, app_config):
        """Build settings from a Flask config, failing fast on missing credentials"""
        username = app_config.get('MAIL_USERNAME') or ''
        if not username:
            raise ConfigurationError('environment variable: GMAIL_USER not set')

        password = app_config.get('MAIL_PASSWORD') or ''
        if not password:
            raise ConfigurationError('environment variable: GMAIL_PASS not set')

        return cls(
            username=username,
            password=password,
            host=app_config.get('MAIL_SERVER', cls.host),
            port=int(app_config.get('MAIL_PORT', cls.port)),
            subject=app_config.get('MAIL_SUBJECT', cls.subject),
            timeout=app_config.get('MAIL_TIMEOUT', cls.timeout),
        )
