"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from datetime import date
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG', 'False')

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'wheels_house')

    # Authentication Settings (token verification only)
    JWT_SECRET = os.getenv('JWT_SECRET')

    # Game Settings
    WHEELWORD_EPOCH = date.fromisoformat(os.getenv('WHEELWORD_EPOCH', '2025-01-01'))
    WHEELWORD_DICTIONARY_CHECK = _env_flag('WHEELWORD_DICTIONARY_CHECK', 'True')
    WHEELWORD_DICTIONARY_PATH = os.getenv('WHEELWORD_DICTIONARY_PATH')
    WHEELWORD_MAX_WRITE_RETRIES = int(os.getenv('WHEELWORD_MAX_WRITE_RETRIES', 5))
    SHARE_URL = os.getenv('SHARE_URL', 'https://wheelshouse.com/wheelword')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    JWT_SECRET = 'testing-jwt-secret-with-enough-length'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
