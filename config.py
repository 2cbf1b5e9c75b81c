import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-key-change-this')
    # Relative SQLite paths resolve under app.instance_path, which Flask-SQLAlchemy creates
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or 'sqlite:///propline.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE')

    # Seeded admin account
    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin')
    ADMIN_EMAIL = os.getenv('ADMIN_EMAIL', 'admin@localhost')

    # Parameter set used by /projection when no ?model= is given
    DEFAULT_MODEL_NAME = os.getenv('DEFAULT_MODEL_NAME', 'receiving_yards_linear')

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_FILE = None
    # Pinned so a local .env cannot leak into tests
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin'
    ADMIN_EMAIL = 'admin@localhost'
    DEFAULT_MODEL_NAME = 'receiving_yards_linear'
