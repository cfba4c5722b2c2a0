"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, keyboard layout and the word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, WORD_LENGTH, MAX_GUESSES, KEYBOARD_ROWS,
    validate_word_list, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'WORD_LENGTH', 'MAX_GUESSES', 'KEYBOARD_ROWS',
    'validate_word_list', 'get_word_statistics'
]
