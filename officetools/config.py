"""
Configuration Module for the Office Tools Application

This module defines configuration classes for different environments:
- DevelopmentConfig: Local development with SQLite
- ProductionConfig: Production deployment with PostgreSQL
- TestingConfig: Automated testing configuration
"""

import os
import sys
from pathlib import Path


class Config:
    """Base configuration with common settings"""

    # Secret key for session management.
    # DO NOT provide an insecure default here.
    # - In development, we load from .env (see wsgi.py) or you can set it explicitly.
    # - In production, the app factory enforces presence.
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Database configuration
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Make database connections more resilient in production (stale connections,
    # temporary network blips). Safe defaults for all environments.
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 300,
    }

    # File upload configuration
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024  # 50MB, shared files are the largest uploads
    TOOL_UPLOAD_MAX_BYTES = 10 * 1024 * 1024  # 10MB per file for cropper/compressor
    SHARED_UPLOAD_FOLDER = os.environ.get(
        'SHARED_UPLOAD_FOLDER',
        os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'shared_uploads'),
    )

    # Rate limiting (Flask-Limiter). Memory storage is per-process only.
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_ENABLED = True
    UPLOAD_RATE_LIMIT = os.environ.get('UPLOAD_RATE_LIMIT', '30 per hour')

    # Identity used for usage/bookmark tracking until accounts exist.
    ANONYMOUS_USERNAME = 'anonymous'

    SITE_NAME = 'Office Tools'


class DevelopmentConfig(Config):
    """Development environment configuration"""

    DEBUG = True
    TESTING = False

    # IMPORTANT (Windows): SQLAlchemy sqlite URLs must use forward slashes.
    _project_root = Path(__file__).resolve().parent.parent
    _default_db_path = (_project_root / 'officetools.db').resolve()

    _env_db_url = os.environ.get('DATABASE_URL')
    if _env_db_url and _env_db_url.strip().startswith('sqlite:'):
        _env_db_url = _env_db_url.replace('\\', '/')

    SQLALCHEMY_DATABASE_URI = _env_db_url or f"sqlite:///{_default_db_path.as_posix()}"

    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production environment configuration"""

    DEBUG = False
    TESTING = False

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        """
        Production database URI, evaluated when the config is loaded.

        - Managed hosts provide DATABASE_URL with a postgres:// prefix
        - SQLAlchemy 1.4+ requires postgresql://
        - SSL is required for managed PostgreSQL
        """
        db_uri = os.environ.get('DATABASE_URL')

        if not db_uri:
            print('❌ FATAL: DATABASE_URL not set in environment', file=sys.stderr)
            return None

        if db_uri.startswith('postgres://'):
            db_uri = 'postgresql://' + db_uri[len('postgres://'):]
            print('✓ Fixed DATABASE_URL prefix: postgres:// -> postgresql://', file=sys.stderr)

        if db_uri.startswith('postgresql://') and 'sslmode=' not in db_uri:
            separator = '&' if '?' in db_uri else '?'
            db_uri = f"{db_uri}{separator}sslmode=require"

        return db_uri

    SQLALCHEMY_ECHO = False


class TestingConfig(Config):
    """Testing environment configuration"""

    TESTING = True
    DEBUG = True

    # In-memory SQLite for fast testing
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

    RATELIMIT_ENABLED = False


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
