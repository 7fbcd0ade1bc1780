"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Rules
    REVEAL_SECONDS = float(os.getenv('REVEAL_SECONDS', 4))
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', 20))
    FAILURE_CHECK_ATTEMPT = int(os.getenv('FAILURE_CHECK_ATTEMPT', 5))
    WIN_THRESHOLD = int(os.getenv('WIN_THRESHOLD', 15))

    # Session Housekeeping
    GAME_IDLE_TIMEOUT_SECONDS = int(os.getenv('GAME_IDLE_TIMEOUT_SECONDS', 1800))
    CLEANUP_INTERVAL_SECONDS = int(os.getenv('CLEANUP_INTERVAL_SECONDS', 60))

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
    GAME_IDLE_TIMEOUT_SECONDS = 60


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
