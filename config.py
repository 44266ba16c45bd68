import os


class Config:
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3000))
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_FILE = os.environ.get('LOG_FILE')

    if FLASK_ENV == 'development':
        LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    else:
        LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    JSON_AS_ASCII = False


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = 'WARNING'
    LOG_FILE = None
