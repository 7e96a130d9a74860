import os

from dotenv import find_dotenv, load_dotenv
from sqlalchemy.engine import URL

# .env in the working directory; real environment variables win
load_dotenv(find_dotenv(usecwd=True))


def _database_uri():
    url = os.environ.get('DATABASE_URL')
    if url:
        return url
    # same variables libpq / node-postgres read
    return URL.create(
        'postgresql',
        username=os.environ.get('PGUSER', 'postgres'),
        password=os.environ.get('PGPASSWORD') or None,
        host=os.environ.get('PGHOST', 'localhost'),
        port=int(os.environ.get('PGPORT', '5432')),
        database=os.environ.get('PGDATABASE', 'postgres'),
    ).render_as_string(hide_password=False)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev_secret_key'
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': int(os.environ.get('DB_POOL_SIZE', '10')),
        'pool_timeout': int(os.environ.get('DB_POOL_TIMEOUT', '30')),
        'pool_pre_ping': True,
    }

    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    STATIC_FOLDER = os.environ.get('STATIC_FOLDER', 'public')
    CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
    CHECK_DB_ON_STARTUP = os.environ.get('CHECK_DB_ON_STARTUP', 'true').lower() in {'1', 'true', 'yes', 'on'}


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    CHECK_DB_ON_STARTUP = False
    LOG_LEVEL = 'DEBUG'
