"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and word data (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_BANK, ACCEPTED_WORDS, MAX_ATTEMPTS, MIN_WORD_LENGTH, MAX_WORD_LENGTH,
    validate_word_bank_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_BANK', 'ACCEPTED_WORDS', 'MAX_ATTEMPTS', 'MIN_WORD_LENGTH', 'MAX_WORD_LENGTH',
    'validate_word_bank_integrity', 'get_word_statistics'
]
