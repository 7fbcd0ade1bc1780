"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Language catalog and rule constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    LANGUAGE_CATALOG, MAX_ATTEMPTS, REVEAL_SECONDS, FAILURE_CHECK_ATTEMPT, WIN_THRESHOLD,
    validate_catalog_integrity, get_catalog_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'LANGUAGE_CATALOG', 'MAX_ATTEMPTS', 'REVEAL_SECONDS', 'FAILURE_CHECK_ATTEMPT', 'WIN_THRESHOLD',
    'validate_catalog_integrity', 'get_catalog_statistics'
]
