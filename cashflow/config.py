"""Configuration for the CashFlow Manager API"""
import os


class Config:
    """Main application configuration"""

    # Database
    # DATABASE_URL wins when set; otherwise use a SQLite file in the `db/`
    # folder at the repository root.
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        f'sqlite:///{os.path.join(BASE_DIR, "db", "cashflow.db")}'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY', 'cashflow-manager-dev-key')

    # Server
    HOST = '0.0.0.0'
    PORT = int(os.environ.get('PORT', 8787))

    API_NAME = 'CashFlow Manager API'
    API_VERSION = '0.1.0'

    # Frontend origins allowed by CORS
    CORS_ORIGINS = ['http://localhost:3000']

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Currency display is pinned, never taken from the host locale
    CURRENCY_FORMAT = 'R {}'
    THOUSANDS_SEPARATOR = ' '
    DEFAULT_CURRENCY = 'ZAR'

    # Budget banding shared by the API and any presentation layer
    DEFAULT_ALERT_THRESHOLD = 0.8
    BUDGET_WARNING_RATIO = 0.8
    BUDGET_EXCEEDED_RATIO = 1.0


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    """In-memory database, used by the test suite"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'


config = {
    'default': Config,
    'development': DevelopmentConfig,
    'testing': TestingConfig,
}
