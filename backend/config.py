import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('true', '1', 'yes', 'on')


def _env_list(name):
    """Split a comma-separated environment variable into a list"""
    raw = os.environ.get(name, '')
    return [item.strip() for item in raw.split(',') if item.strip()]


class Config:
    """Base configuration class"""
    # SMTP transport (Gmail over SSL by default)
    SMTP_SERVER = os.environ.get('SMTP_SERVER', 'smtp.gmail.com')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', 465))
    SMTP_ENCRYPTION = os.environ.get('SMTP_ENCRYPTION', 'ssl')  # 'ssl', 'tls', or 'none'
    SMTP_USER = os.environ.get('SMTP_USER') or os.environ.get('GMAIL_USER', '')
    SMTP_PASS = os.environ.get('SMTP_PASS') or os.environ.get('GMAIL_APP_PASSWORD', '')
    SMTP_FROM_EMAIL = os.environ.get('SMTP_FROM_EMAIL', '')  # defaults to SMTP_USER
    SMTP_FROM_NAME = os.environ.get('SMTP_FROM_NAME', '')
    SMTP_TIMEOUT = int(os.environ.get('SMTP_TIMEOUT', 30))

    # Where form submissions are delivered
    RECIPIENT_EMAIL = os.environ.get('RECIPIENT_EMAIL') or SMTP_USER

    # Only the deployed frontend may call the API
    CORS_ORIGIN = os.environ.get('CORS_ORIGIN', 'https://eorionev.netlify.app')

    # Empty list accepts any non-empty charger type
    CHARGER_TYPES = _env_list('CHARGER_TYPES')

    # Check the SMTP login once when the process starts
    VERIFY_SMTP_ON_STARTUP = _env_bool('VERIFY_SMTP_ON_STARTUP', True)

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Application Settings
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')
    DEBUG = False if FLASK_ENV == 'production' else _env_bool('FLASK_DEBUG', False)

    VERSION = '1.0.0'


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SMTP_SERVER = 'smtp.test.local'
    SMTP_PORT = 465
    SMTP_ENCRYPTION = 'ssl'
    SMTP_USER = 'relay@test.local'
    SMTP_PASS = 'test-app-password'
    SMTP_FROM_EMAIL = ''
    SMTP_FROM_NAME = ''
    RECIPIENT_EMAIL = 'sales@test.local'
    CORS_ORIGIN = 'https://frontend.test.local'
    CHARGER_TYPES = []
    VERIFY_SMTP_ON_STARTUP = False
